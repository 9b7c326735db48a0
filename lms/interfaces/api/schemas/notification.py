"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    message: str
    type: str
    related_id: int | None = None
    is_read: bool
    created_at: datetime
    actor_name: str | None = None
    subject_title: str | None = None


class NotificationCount(BaseModel):
    count: int


class MessageResponse(BaseModel):
    message: str


__all__ = ["MessageResponse", "NotificationCount", "NotificationRead"]
