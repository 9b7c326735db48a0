"""Routes for submitting and grading assignments."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lms.application.use_cases.assignments import grade_submission, submit_assignment
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import require_staff, require_student
from lms.interfaces.api.errors import to_http_error
from lms.interfaces.api.schemas import SubmissionCreate, SubmissionGrade, SubmissionRead

router = APIRouter(tags=["assignments"])


@router.post(
    "/assignments/{assignment_id}/submissions",
    response_model=SubmissionRead,
    status_code=status.HTTP_201_CREATED,
)
def submit(
    assignment_id: int,
    payload: SubmissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    try:
        submission = submit_assignment(
            db,
            student=current_user,
            assignment_id=assignment_id,
            submission_text=payload.submission_text,
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return SubmissionRead.model_validate(submission)


@router.put("/submissions/{submission_id}/grade", response_model=SubmissionRead)
def grade(
    submission_id: int,
    payload: SubmissionGrade,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    """Grade a submission; the student is notified with the percentage."""

    try:
        submission = grade_submission(
            db,
            grader=current_user,
            submission_id=submission_id,
            grade=payload.grade,
            feedback=payload.feedback,
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return SubmissionRead.model_validate(submission)
