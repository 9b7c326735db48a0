"""Announcement schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from lms.domain.entities import ANNOUNCEMENT_TARGETS, TARGET_ALL

_TARGET_PATTERN = "^(" + "|".join(ANNOUNCEMENT_TARGETS) + ")$"


class AnnouncementWrite(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)
    target: str = Field(default=TARGET_ALL, pattern=_TARGET_PATTERN)
    campus: str | None = Field(default=None, max_length=50)


class AnnouncementRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    content: str
    target: str
    campus: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
