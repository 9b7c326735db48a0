"""Domain entities for direct and group conversations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Conversation:
    id: int | None
    title: str | None
    is_group: bool
    participant_ids: list[int] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Message:
    id: int | None
    conversation_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None


__all__ = ["Conversation", "Message"]
