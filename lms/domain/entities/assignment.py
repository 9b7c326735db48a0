"""Domain entities for assignments and their submissions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Final

SUBMISSION_STATUS_SUBMITTED: Final[str] = "submitted"
SUBMISSION_STATUS_GRADED: Final[str] = "graded"


@dataclass
class Assignment:
    """Work posted by a teacher to one course."""

    id: int | None
    course_id: int
    title: str
    description: str | None
    due_date: datetime
    points: int
    created_at: datetime | None = None


@dataclass
class AssignmentSubmission:
    """A student's answer to an assignment, optionally graded."""

    id: int | None
    assignment_id: int
    student_id: int
    submission_text: str | None = None
    status: str = SUBMISSION_STATUS_SUBMITTED
    grade: Decimal | None = None
    feedback: str | None = None
    submitted_at: datetime | None = None
    graded_at: datetime | None = None
    graded_by: int | None = None


__all__ = [
    "Assignment",
    "AssignmentSubmission",
    "SUBMISSION_STATUS_SUBMITTED",
    "SUBMISSION_STATUS_GRADED",
]
