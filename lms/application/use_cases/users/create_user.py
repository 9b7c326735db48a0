"""Use case for creating users."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_account_created
from lms.domain.entities import ALL_CAMPUSES, User
from lms.infrastructure.repositories import RoleRepository, UserRepository
from lms.infrastructure.security import get_password_hash
from lms.utils import now_in_app_naive_datetime


def create_user(
    session: Session,
    *,
    name: str,
    role_alias: str,
    email: str,
    password: str,
    campus: str = ALL_CAMPUSES,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Name must not be empty")

    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    role = RoleRepository(session).get_by_alias(role_alias)
    if role is None:
        raise ValueError(f"Unknown role '{role_alias}'")

    user = User(
        id=None,
        role=role,
        name=normalized_name,
        email=email,
        password=get_password_hash(password),
        campus=campus.strip() or ALL_CAMPUSES,
        is_active=True,
        created_at=now_in_app_naive_datetime(),
    )

    saved_user = repository.create(user)
    notify_account_created(session, user=saved_user)
    return saved_user
