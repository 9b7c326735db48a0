"""Assignment and submission schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AssignmentCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    due_date: datetime
    points: int = Field(default=100, gt=0)


class AssignmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    title: str
    description: str | None
    due_date: datetime
    points: int
    created_at: datetime | None = None


class SubmissionCreate(BaseModel):
    submission_text: str | None = None


class SubmissionGrade(BaseModel):
    grade: Decimal = Field(..., ge=0)
    feedback: str | None = None


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    assignment_id: int
    student_id: int
    submission_text: str | None
    status: str
    grade: Decimal | None = None
    feedback: str | None = None
    submitted_at: datetime | None = None
    graded_at: datetime | None = None
