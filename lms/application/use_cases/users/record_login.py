"""Use case for registering the last login of a user."""

from sqlalchemy.orm import Session

from lms.infrastructure.repositories import UserRepository
from lms.utils import now_in_app_naive_datetime


def record_login(session: Session, user_id: int) -> None:
    """Persist the last login timestamp for the given user."""

    UserRepository(session).record_login(user_id, now_in_app_naive_datetime())
