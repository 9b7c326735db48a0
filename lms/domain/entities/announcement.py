"""Domain entity representing an announcement."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

TARGET_ALL: Final[str] = "all"
TARGET_STUDENTS: Final[str] = "students"
TARGET_TEACHERS: Final[str] = "teachers"
TARGET_ADMINS: Final[str] = "admins"

ANNOUNCEMENT_TARGETS: Final[tuple[str, ...]] = (
    TARGET_ALL,
    TARGET_STUDENTS,
    TARGET_TEACHERS,
    TARGET_ADMINS,
)


@dataclass
class Announcement:
    """Message published to an audience, optionally limited to a campus."""

    id: int | None
    author_id: int
    title: str
    content: str
    target: str
    campus: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "Announcement",
    "ANNOUNCEMENT_TARGETS",
    "TARGET_ALL",
    "TARGET_STUDENTS",
    "TARGET_TEACHERS",
    "TARGET_ADMINS",
]
