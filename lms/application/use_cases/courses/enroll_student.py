"""Use case for a student enrolling in a course."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_student_enrolled
from lms.domain.entities import (
    COURSE_STATUS_ACTIVE,
    ENROLLMENT_STATUS_ACTIVE,
    REQUEST_STATUS_APPROVED,
    CourseEnrollment,
    User,
)
from lms.infrastructure.repositories import CourseRepository, EnrollmentRepository


def enroll_student(session: Session, *, student: User, course_id: int) -> CourseEnrollment:
    """Enroll ``student`` in the course, reactivating a dropped enrollment."""

    if not student.is_student():
        raise PermissionError("Only students can enroll in courses")

    course = CourseRepository(session).get(course_id)
    if course is None:
        raise LookupError("Course not found")
    if course.status != COURSE_STATUS_ACTIVE or course.request_status != REQUEST_STATUS_APPROVED:
        raise ValueError("Course is not open for enrollment")

    repository = EnrollmentRepository(session)
    existing = repository.get(student_id=student.id, course_id=course_id)
    if existing is not None and existing.status == ENROLLMENT_STATUS_ACTIVE:
        raise ValueError("Already enrolled in this course")

    if existing is not None:
        enrollment = repository.update_status(existing.id, ENROLLMENT_STATUS_ACTIVE)
    else:
        enrollment = repository.create(
            CourseEnrollment(
                id=None,
                student_id=student.id,
                course_id=course_id,
                status=ENROLLMENT_STATUS_ACTIVE,
            )
        )
    notify_student_enrolled(session, course=course, student=student)
    return enrollment
