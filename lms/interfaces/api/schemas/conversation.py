"""Conversation and message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversationCreate(BaseModel):
    participant_ids: list[int] = Field(..., min_length=1)
    title: str | None = Field(default=None, max_length=100)


class ConversationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str | None
    is_group: bool
    participant_ids: list[int]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MessageCreate(BaseModel):
    content: str = Field(..., min_length=1)


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    conversation_id: int
    sender_id: int
    content: str
    created_at: datetime | None = None
