"""Use case for an administrator approving or rejecting a course request."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_course_request_decided
from lms.domain.entities import (
    COURSE_STATUS_ACTIVE,
    COURSE_STATUS_INACTIVE,
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_PENDING,
    REQUEST_STATUS_REJECTED,
    Course,
    User,
)
from lms.infrastructure.repositories import CourseRepository

_DECISIONS = {
    REQUEST_STATUS_APPROVED: COURSE_STATUS_ACTIVE,
    REQUEST_STATUS_REJECTED: COURSE_STATUS_INACTIVE,
}


def decide_course_request(
    session: Session,
    *,
    admin: User,
    course_id: int,
    decision: str,
    notes: str | None = None,
) -> Course:
    """Apply ``decision`` to a pending request and notify everyone affected."""

    if not admin.is_admin():
        raise PermissionError("Only administrators can review course requests")

    course_status = _DECISIONS.get(decision)
    if course_status is None:
        raise ValueError("Decision must be 'approved' or 'rejected'")

    repository = CourseRepository(session)
    course = repository.get(course_id)
    if course is None:
        raise LookupError("Course not found")
    if course.request_status != REQUEST_STATUS_PENDING:
        raise ValueError("Course request has already been reviewed")

    updated = repository.update_request_status(
        course_id,
        request_status=decision,
        status=course_status,
        request_notes=notes.strip() if notes and notes.strip() else None,
    )
    notify_course_request_decided(session, course=updated, admin=admin)
    return updated
