"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

NOTIFICATION_TYPE_ASSIGNMENT: Final[str] = "assignment"
NOTIFICATION_TYPE_SUBMISSION: Final[str] = "submission"
NOTIFICATION_TYPE_GRADE: Final[str] = "grade"
NOTIFICATION_TYPE_COURSE: Final[str] = "course"
NOTIFICATION_TYPE_MESSAGE: Final[str] = "message"
NOTIFICATION_TYPE_ANNOUNCEMENT: Final[str] = "announcement"
NOTIFICATION_TYPE_SYSTEM: Final[str] = "system"

NOTIFICATION_TYPES: Final[tuple[str, ...]] = (
    NOTIFICATION_TYPE_ASSIGNMENT,
    NOTIFICATION_TYPE_SUBMISSION,
    NOTIFICATION_TYPE_GRADE,
    NOTIFICATION_TYPE_COURSE,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_ANNOUNCEMENT,
    NOTIFICATION_TYPE_SYSTEM,
)


@dataclass
class Notification:
    """Information message delivered to exactly one user.

    ``related_id`` points at the assignment, course, announcement or
    conversation named by ``type`` and may dangle once that entity is gone.
    """

    id: int | None
    user_id: int
    title: str
    message: str
    type: str
    related_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None
    actor_name: str | None = None
    subject_title: str | None = None


__all__ = [
    "Notification",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ASSIGNMENT",
    "NOTIFICATION_TYPE_SUBMISSION",
    "NOTIFICATION_TYPE_GRADE",
    "NOTIFICATION_TYPE_COURSE",
    "NOTIFICATION_TYPE_MESSAGE",
    "NOTIFICATION_TYPE_ANNOUNCEMENT",
    "NOTIFICATION_TYPE_SYSTEM",
]
