"""Endpoints for reading and updating the caller's notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import (
    clear_notifications,
    count_unread_notifications,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
)
from lms.application.use_cases.notifications.inbox import MAX_PAGE_SIZE
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import get_current_active_user
from lms.interfaces.api.schemas import (
    MessageResponse,
    NotificationCount,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    limit: int | None = Query(default=None, ge=1, le=MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    notifications = list_notifications_uc(db, user_id=current_user.id, limit=limit)
    return [NotificationRead.model_validate(item) for item in notifications]


@router.get("/count", response_model=NotificationCount)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationCount:
    return NotificationCount(count=count_unread_notifications(db, user_id=current_user.id))


@router.patch("/{notification_id}", response_model=MessageResponse)
def mark_as_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        mark_notification_read(db, user_id=current_user.id, notification_id=notification_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return MessageResponse(message="Notification marked as read")


@router.patch("", response_model=MessageResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    mark_all_notifications_read(db, user_id=current_user.id)
    return MessageResponse(message="All notifications marked as read")


@router.delete("", response_model=MessageResponse)
def clear_all(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    clear_notifications(db, user_id=current_user.id)
    return MessageResponse(message="All notifications cleared")
