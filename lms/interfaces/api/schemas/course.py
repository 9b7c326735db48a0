"""Course, enrollment and attendance schemas."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from lms.domain.entities import ATTENDANCE_STATUSES, REQUEST_STATUS_APPROVED, REQUEST_STATUS_REJECTED

_ATTENDANCE_PATTERN = "^(" + "|".join(ATTENDANCE_STATUSES) + ")$"


class CourseRequestCreate(BaseModel):
    code: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    department: str = Field(..., min_length=1, max_length=100)
    campus: str | None = Field(default=None, max_length=50)
    credit_hours: int = Field(default=3, ge=1, le=12)


class CourseRequestDecision(BaseModel):
    status: str = Field(..., pattern=f"^({REQUEST_STATUS_APPROVED}|{REQUEST_STATUS_REJECTED})$")
    notes: str | None = None


class CourseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    department: str
    campus: str
    instructor_id: int | None
    status: str
    credit_hours: int
    request_status: str
    request_notes: str | None = None
    created_at: dt.datetime | None = None


class EnrollmentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    course_id: int
    status: str
    enrolled_at: dt.datetime | None = None


class AttendanceMark(BaseModel):
    student_id: int = Field(..., ge=1)
    status: str = Field(..., pattern=_ATTENDANCE_PATTERN)


class AttendanceCreate(BaseModel):
    date: dt.date
    records: list[AttendanceMark] = Field(..., min_length=1)


class AttendanceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: int
    student_id: int
    date: dt.date
    status: str
