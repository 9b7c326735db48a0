"""Shared lookups for the assignment use cases."""

from sqlalchemy.orm import Session

from lms.domain.entities import Course, User
from lms.infrastructure.repositories import CourseRepository


def get_course_for_instructor(session: Session, *, course_id: int, user: User) -> Course:
    """Return the course when ``user`` teaches it or is an administrator."""

    course = CourseRepository(session).get(course_id)
    if course is None:
        raise LookupError("Course not found")
    if not user.is_admin() and course.instructor_id != user.id:
        raise PermissionError("You are not the instructor of this course")
    return course
