"""Routes for course requests, enrollments, assignments and attendance."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from lms.application.use_cases.assignments import create_assignment
from lms.application.use_cases.attendance import record_attendance
from lms.application.use_cases.courses import (
    decide_course_request,
    enroll_student,
    request_course,
)
from lms.domain.entities import User
from lms.infrastructure.database import get_db
from lms.interfaces.api.dependencies import (
    require_admin,
    require_staff,
    require_student,
    require_teacher,
)
from lms.interfaces.api.errors import to_http_error
from lms.interfaces.api.schemas import (
    AssignmentCreate,
    AssignmentRead,
    AttendanceCreate,
    AttendanceRead,
    CourseRead,
    CourseRequestCreate,
    CourseRequestDecision,
    EnrollmentRead,
)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("/requests", response_model=CourseRead, status_code=status.HTTP_201_CREATED)
def submit_course_request(
    payload: CourseRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_teacher),
):
    """Request a new course; every administrator is notified."""

    try:
        course = request_course(db, faculty=current_user, **payload.model_dump())
    except (ValueError, PermissionError) as exc:
        raise to_http_error(exc) from exc
    return CourseRead.model_validate(course)


@router.patch("/{course_id}/request-status", response_model=CourseRead)
def review_course_request(
    course_id: int,
    payload: CourseRequestDecision,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    try:
        course = decide_course_request(
            db,
            admin=current_user,
            course_id=course_id,
            decision=payload.status,
            notes=payload.notes,
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return CourseRead.model_validate(course)


@router.post(
    "/{course_id}/enrollments",
    response_model=EnrollmentRead,
    status_code=status.HTTP_201_CREATED,
)
def enroll(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    try:
        enrollment = enroll_student(db, student=current_user, course_id=course_id)
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return EnrollmentRead.model_validate(enrollment)


@router.post(
    "/{course_id}/assignments",
    response_model=AssignmentRead,
    status_code=status.HTTP_201_CREATED,
)
def post_assignment(
    course_id: int,
    payload: AssignmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_teacher),
):
    """Post an assignment; enrolled students are notified."""

    try:
        assignment = create_assignment(
            db, teacher=current_user, course_id=course_id, **payload.model_dump()
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return AssignmentRead.model_validate(assignment)


@router.post(
    "/{course_id}/attendance",
    response_model=list[AttendanceRead],
    status_code=status.HTTP_201_CREATED,
)
def save_attendance(
    course_id: int,
    payload: AttendanceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    """Store every mark of the day or none of them."""

    try:
        records = record_attendance(
            db,
            recorder=current_user,
            course_id=course_id,
            day=payload.date,
            marks=[(mark.student_id, mark.status) for mark in payload.records],
        )
    except (ValueError, PermissionError, LookupError) as exc:
        raise to_http_error(exc) from exc
    return [AttendanceRead.model_validate(record) for record in records]
