"""Shared fixtures: a fresh SQLite database per test and helpers to seed it."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

os.environ["DATABASE_URL"] = f"sqlite:///{Path(tempfile.gettempdir()) / 'lms_api_test.db'}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["NOTIFICATION_PAGE_SIZE"] = "15"

from lms.config import get_settings, reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from lms.domain.entities import ALL_CAMPUSES, Course, CourseEnrollment, User  # noqa: E402
from lms.infrastructure.database import Database  # noqa: E402
from lms.infrastructure.migrations import run_migrations  # noqa: E402
from lms.infrastructure.repositories import (  # noqa: E402
    CourseRepository,
    EnrollmentRepository,
    RoleRepository,
    UserRepository,
)
from lms.infrastructure.security import (  # noqa: E402
    create_access_token,
    get_password_hash,
    password_signature,
)

PASSWORD = "Secret123!"
PASSWORD_HASH = get_password_hash(PASSWORD)


@pytest.fixture()
def user_password() -> str:
    """Plain-text password shared by every seeded user."""

    return PASSWORD


@pytest.fixture()
def database(tmp_path: Path):
    """Open a client on an empty database file and migrate it."""

    db = Database(f"sqlite:///{tmp_path / 'lms.db'}")
    db.open()
    run_migrations(db)
    yield db
    db.close()


@pytest.fixture()
def session(database: Database):
    db_session = database.session()
    yield db_session
    db_session.close()


@pytest.fixture()
def make_user(session: Session) -> Callable[..., User]:
    """Insert users directly, without the welcome notification of the use case."""

    counter = {"value": 0}

    def _make_user(
        role: str,
        name: str | None = None,
        *,
        campus: str = "Main Campus",
        is_active: bool = True,
    ) -> User:
        counter["value"] += 1
        number = counter["value"]
        user = User(
            id=None,
            role=RoleRepository(session).get_by_alias(role),
            name=name or f"{role.title()} {number}",
            email=f"{role}{number}@example.com",
            password=PASSWORD_HASH,
            campus=campus,
            is_active=is_active,
        )
        return UserRepository(session).create(user)

    return _make_user


@pytest.fixture()
def admin(make_user) -> User:
    return make_user("admin", "Ada Admin", campus=ALL_CAMPUSES)


@pytest.fixture()
def make_course(session: Session) -> Callable[..., Course]:
    """Insert an approved, active course taught by ``instructor``."""

    def _make_course(instructor: User, *, code: str = "CS101", name: str = "Intro to CS") -> Course:
        course = Course(
            id=None,
            code=code,
            name=name,
            department="Computer Science",
            campus=instructor.campus,
            instructor_id=instructor.id,
        )
        return CourseRepository(session).create(course)

    return _make_course


@pytest.fixture()
def enroll(session: Session) -> Callable[..., CourseEnrollment]:
    def _enroll(student: User, course: Course, *, status: str = "active") -> CourseEnrollment:
        enrollment = CourseEnrollment(
            id=None, student_id=student.id, course_id=course.id, status=status
        )
        return EnrollmentRepository(session).create(enrollment)

    return _enroll


def _auth_headers(user: User) -> dict[str, str]:
    token = create_access_token(
        data={
            "sub": user.email,
            "role": user.role.alias,
            "pwd_sig": password_signature(user.password, user.is_active),
        }
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Build bearer headers for a user without going through the login form."""

    return _auth_headers


@pytest.fixture()
def client(database: Database):
    """Return a test client bound to an application using ``database``."""

    from main import create_app

    app = create_app(settings=get_settings(), database=database)
    with TestClient(app) as test_client:
        yield test_client
