"""Use case for grading a submitted assignment."""

from decimal import Decimal

from sqlalchemy.orm import Session

from lms.application.use_cases.notifications import notify_submission_graded
from lms.domain.entities import AssignmentSubmission, User
from lms.infrastructure.repositories import AssignmentRepository, SubmissionRepository
from lms.utils import now_in_app_naive_datetime

from ._access import get_course_for_instructor


def grade_submission(
    session: Session,
    *,
    grader: User,
    submission_id: int,
    grade: Decimal,
    feedback: str | None = None,
) -> AssignmentSubmission:
    """Record the grade and notify the student who submitted the work.

    Regrading is allowed and notifies the student again.
    """

    repository = SubmissionRepository(session)
    submission = repository.get(submission_id)
    if submission is None:
        raise LookupError("Submission not found")
    assignment = AssignmentRepository(session).get(submission.assignment_id)
    if assignment is None:
        raise LookupError("Assignment not found")
    course = get_course_for_instructor(session, course_id=assignment.course_id, user=grader)

    grade = Decimal(str(grade))
    if grade < 0 or grade > assignment.points:
        raise ValueError(f"Grade must be between 0 and {assignment.points}")

    graded = repository.grade(
        submission_id,
        grade=grade,
        feedback=feedback,
        graded_by=grader.id,
        graded_at=now_in_app_naive_datetime(),
    )
    notify_submission_graded(
        session, submission=graded, assignment=assignment, course=course, grader=grader
    )
    return graded
