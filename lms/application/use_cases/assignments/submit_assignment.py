"""Use case for a student handing in an assignment."""

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_submission_received
from lms.domain.entities import AssignmentSubmission, User
from lms.infrastructure.repositories import (
    AssignmentRepository,
    CourseRepository,
    EnrollmentRepository,
    SubmissionRepository,
)


def submit_assignment(
    session: Session,
    *,
    student: User,
    assignment_id: int,
    submission_text: str | None = None,
) -> AssignmentSubmission:
    """Store the submission and notify the course instructor."""

    assignment = AssignmentRepository(session).get(assignment_id)
    if assignment is None:
        raise LookupError("Assignment not found")
    course = CourseRepository(session).get(assignment.course_id)
    if course is None:
        raise LookupError("Course not found")

    enrolled_ids = EnrollmentRepository(session).list_student_ids(course.id)
    if student.id not in enrolled_ids:
        raise PermissionError("You are not enrolled in this course")

    repository = SubmissionRepository(session)
    existing = repository.get_by_assignment_and_student(
        assignment_id=assignment_id, student_id=student.id
    )
    if existing is not None:
        raise ValueError("Assignment has already been submitted")

    saved = repository.create(
        AssignmentSubmission(
            id=None,
            assignment_id=assignment_id,
            student_id=student.id,
            submission_text=submission_text,
        )
    )
    notify_submission_received(
        session, assignment=assignment, course=course, student=student
    )
    return saved
