"""Use case for posting a new assignment to a course."""

from datetime import datetime

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_assignment_created
from lms.domain.entities import Assignment, User
from lms.infrastructure.repositories import AssignmentRepository

from ._access import get_course_for_instructor


def create_assignment(
    session: Session,
    *,
    teacher: User,
    course_id: int,
    title: str,
    due_date: datetime,
    points: int,
    description: str | None = None,
) -> Assignment:
    """Create the assignment and notify the students enrolled in the course."""

    course = get_course_for_instructor(session, course_id=course_id, user=teacher)

    normalized_title = title.strip()
    if not normalized_title:
        raise ValueError("Assignment title must not be empty")
    if points <= 0:
        raise ValueError("Assignment points must be greater than zero")

    assignment = Assignment(
        id=None,
        course_id=course.id,
        title=normalized_title,
        description=description,
        due_date=due_date,
        points=points,
    )
    saved = AssignmentRepository(session).create(assignment)
    notify_assignment_created(session, assignment=saved, course=course)
    return saved
