"""Read and update the notifications owned by the calling user."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from lms.config import get_settings
from lms.domain.entities import Notification
from lms.infrastructure.repositories import NotificationRepository

MAX_PAGE_SIZE = 100


def list_notifications(
    session: Session, *, user_id: int, limit: int | None = None
) -> Sequence[Notification]:
    """Return the newest notifications of ``user_id``, newest first."""

    if limit is None:
        limit = get_settings().notification_page_size
    if limit <= 0 or limit > MAX_PAGE_SIZE:
        msg = f"Limit must be between 1 and {MAX_PAGE_SIZE}"
        raise ValueError(msg)
    return NotificationRepository(session).list_for_user(user_id, limit=limit)


def count_unread_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(
    session: Session, *, user_id: int, notification_id: int
) -> Notification:
    """Flag a single notification as read.

    Marking an already read notification is a no-op. A notification that does
    not exist and one owned by another user are reported the same way.
    """

    repository = NotificationRepository(session)
    notification = repository.get_for_user(notification_id, user_id=user_id)
    if notification is None:
        raise LookupError("Notification not found")
    if not notification.is_read:
        repository.mark_as_read(notification_id, user_id=user_id)
        notification.is_read = True
    return notification


def mark_all_notifications_read(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)


def clear_notifications(session: Session, *, user_id: int) -> int:
    return NotificationRepository(session).delete_all_for_user(user_id)


__all__ = [
    "MAX_PAGE_SIZE",
    "clear_notifications",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
