"""Routes for user accounts and their notification preferences."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lms.application.use_cases.users import (
    create_user as create_user_uc,
    get_notification_settings,
    update_notification_settings,
)
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import get_current_active_user, require_admin
from lms.interfaces.api.schemas import (
    NotificationSettingsRead,
    NotificationSettingsUpdate,
    UserCreate,
    UserRead,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Create a new account; the user receives a welcome notification."""

    try:
        user = create_user_uc(
            db,
            name=user_in.name,
            role_alias=user_in.role,
            email=user_in.email,
            password=user_in.password,
            campus=user_in.campus,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return UserRead.model_validate(current_user)


@router.get("/me/settings", response_model=NotificationSettingsRead)
def read_notification_settings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    settings = get_notification_settings(db, user_id=current_user.id)
    return NotificationSettingsRead.model_validate(settings)


@router.put("/me/settings", response_model=NotificationSettingsRead)
def change_notification_settings(
    payload: NotificationSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Update only the preferences present in the body."""

    settings = update_notification_settings(
        db, user_id=current_user.id, **payload.model_dump(exclude_unset=True)
    )
    return NotificationSettingsRead.model_validate(settings)
