"""Domain entities describing courses and enrollments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

COURSE_STATUS_ACTIVE: Final[str] = "active"
COURSE_STATUS_INACTIVE: Final[str] = "inactive"

REQUEST_STATUS_PENDING: Final[str] = "pending"
REQUEST_STATUS_APPROVED: Final[str] = "approved"
REQUEST_STATUS_REJECTED: Final[str] = "rejected"

ENROLLMENT_STATUS_ACTIVE: Final[str] = "active"
ENROLLMENT_STATUS_COMPLETED: Final[str] = "completed"
ENROLLMENT_STATUS_DROPPED: Final[str] = "dropped"


@dataclass
class Course:
    """A course taught by one instructor on one campus."""

    id: int | None
    code: str
    name: str
    department: str
    campus: str
    instructor_id: int | None
    status: str = COURSE_STATUS_ACTIVE
    credit_hours: int = 3
    request_status: str = REQUEST_STATUS_APPROVED
    request_notes: str | None = None
    created_at: datetime | None = None


@dataclass
class CourseEnrollment:
    """Link between a student and a course."""

    id: int | None
    student_id: int
    course_id: int
    status: str = ENROLLMENT_STATUS_ACTIVE
    enrolled_at: datetime | None = None


__all__ = [
    "Course",
    "CourseEnrollment",
    "COURSE_STATUS_ACTIVE",
    "COURSE_STATUS_INACTIVE",
    "REQUEST_STATUS_PENDING",
    "REQUEST_STATUS_APPROVED",
    "REQUEST_STATUS_REJECTED",
    "ENROLLMENT_STATUS_ACTIVE",
    "ENROLLMENT_STATUS_COMPLETED",
    "ENROLLMENT_STATUS_DROPPED",
]
