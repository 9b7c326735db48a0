"""Use case for a faculty member requesting a new course."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_course_requested
from lms.domain.entities import (
    COURSE_STATUS_INACTIVE,
    REQUEST_STATUS_PENDING,
    Course,
    User,
)
from lms.infrastructure.repositories import CourseRepository


def request_course(
    session: Session,
    *,
    faculty: User,
    code: str,
    name: str,
    department: str,
    campus: str | None = None,
    credit_hours: int = 3,
) -> Course:
    """Store the course as an inactive, pending request and alert the admins."""

    if not faculty.is_teacher():
        raise PermissionError("Only faculty members can request courses")

    normalized_code = code.strip().upper()
    normalized_name = name.strip()
    if not normalized_code or not normalized_name:
        raise ValueError("Course code and name are required")

    repository = CourseRepository(session)
    if repository.get_by_code(normalized_code) is not None:
        raise ValueError(f"Course code '{normalized_code}' is already in use")

    course = Course(
        id=None,
        code=normalized_code,
        name=normalized_name,
        department=department.strip(),
        campus=(campus or faculty.campus).strip(),
        instructor_id=faculty.id,
        status=COURSE_STATUS_INACTIVE,
        credit_hours=credit_hours,
        request_status=REQUEST_STATUS_PENDING,
    )
    saved_course = repository.create(course)
    notify_course_requested(session, course=saved_course, faculty=faculty)
    return saved_course
