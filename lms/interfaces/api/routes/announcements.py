"""Routes for publishing announcements."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lms.application.use_cases.announcements import (
    publish_announcement,
    update_announcement,
)
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import require_staff
from lms.interfaces.api.errors import to_http_error
from lms.interfaces.api.schemas import AnnouncementRead, AnnouncementWrite

router = APIRouter(prefix="/announcements", tags=["announcements"])


@router.post("", response_model=AnnouncementRead, status_code=status.HTTP_201_CREATED)
def publish(
    payload: AnnouncementWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    try:
        announcement = publish_announcement(db, author=current_user, **payload.model_dump())
    except (ValueError, PermissionError) as exc:
        raise to_http_error(exc) from exc
    return AnnouncementRead.model_validate(announcement)


@router.put("/{announcement_id}", response_model=AnnouncementRead)
def update(
    announcement_id: int,
    payload: AnnouncementWrite,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    try:
        announcement = update_announcement(
            db,
            editor=current_user,
            announcement_id=announcement_id,
            **payload.model_dump(),
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return AnnouncementRead.model_validate(announcement)
