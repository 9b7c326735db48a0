"""Domain entity holding per-user notification preferences."""

from dataclasses import dataclass


@dataclass
class UserSettings:
    """Opt-outs for the notification types a user may silence.

    ``assignment_notifications`` also covers the instructor's new-submission
    notice. Grades, course decisions and system messages are always delivered.
    """

    user_id: int
    assignment_notifications: bool = True
    message_notifications: bool = True
    announcement_notifications: bool = True


__all__ = ["UserSettings"]
