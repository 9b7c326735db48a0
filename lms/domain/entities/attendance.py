"""Domain entity representing an attendance mark."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Final

ATTENDANCE_STATUSES: Final[tuple[str, ...]] = ("present", "absent", "late", "excused")


@dataclass
class AttendanceRecord:
    id: int | None
    course_id: int
    student_id: int
    date: date
    status: str
    recorded_by: int | None = None


__all__ = ["AttendanceRecord", "ATTENDANCE_STATUSES"]
