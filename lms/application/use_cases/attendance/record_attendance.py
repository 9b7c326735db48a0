"""Use case for recording a day of attendance for a course."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lms.domain.entities import ATTENDANCE_STATUSES, AttendanceRecord, User
from lms.infrastructure.repositories import (
    AttendanceRepository,
    CourseRepository,
    EnrollmentRepository,
)

logger = logging.getLogger(__name__)


def record_attendance(
    session: Session,
    *,
    recorder: User,
    course_id: int,
    day: date,
    marks: Iterable[tuple[int, str]],
) -> list[AttendanceRecord]:
    """Upsert every ``(student_id, status)`` mark as one transaction.

    Either all marks are stored or none is. An invalid mark rolls back the
    marks already staged and raises ``ValueError``; a database error is
    rolled back, logged and re-raised.
    """

    course = CourseRepository(session).get(course_id)
    if course is None:
        raise LookupError("Course not found")
    if not recorder.is_admin() and course.instructor_id != recorder.id:
        raise PermissionError("You are not the instructor of this course")

    enrolled = set(EnrollmentRepository(session).list_student_ids(course_id))
    repository = AttendanceRepository(session)
    saved: list[AttendanceRecord] = []
    try:
        for student_id, status in marks:
            if status not in ATTENDANCE_STATUSES:
                raise ValueError(f"Invalid attendance status '{status}'")
            if student_id not in enrolled:
                raise ValueError(f"Student {student_id} is not enrolled in this course")
            saved.append(
                repository.upsert(
                    AttendanceRecord(
                        id=None,
                        course_id=course_id,
                        student_id=student_id,
                        date=day,
                        status=status,
                        recorded_by=recorder.id,
                    )
                )
            )
        session.commit()
    except ValueError:
        session.rollback()
        raise
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to record attendance for course %s", course_id)
        raise

    logger.info(
        "Recorded %d attendance marks for course %s on %s", len(saved), course_id, day
    )
    return saved
