"""Use cases for the per-user notification preferences."""

from sqlalchemy.orm import Session

from lms.domain.entities import UserSettings
from lms.infrastructure.repositories import UserSettingsRepository


def get_notification_settings(session: Session, *, user_id: int) -> UserSettings:
    return UserSettingsRepository(session).get(user_id)


def update_notification_settings(
    session: Session,
    *,
    user_id: int,
    assignment_notifications: bool | None = None,
    message_notifications: bool | None = None,
    announcement_notifications: bool | None = None,
) -> UserSettings:
    """Change only the preferences that were provided."""

    repository = UserSettingsRepository(session)
    current = repository.get(user_id)
    if assignment_notifications is not None:
        current.assignment_notifications = assignment_notifications
    if message_notifications is not None:
        current.message_notifications = message_notifications
    if announcement_notifications is not None:
        current.announcement_notifications = announcement_notifications
    return repository.save(current)
