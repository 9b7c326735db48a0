"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from lms.domain.entities import ALL_CAMPUSES, ROLE_ADMIN, ROLE_STUDENT, ROLE_TEACHER


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    alias: str


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: str = Field(..., pattern=f"^({ROLE_STUDENT}|{ROLE_TEACHER}|{ROLE_ADMIN})$")
    campus: str = Field(default=ALL_CAMPUSES, min_length=1, max_length=50)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    campus: str
    is_active: bool
    created_at: datetime | None
    last_login: datetime | None
    role: RoleRead


class NotificationSettingsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    assignment_notifications: bool
    message_notifications: bool
    announcement_notifications: bool


class NotificationSettingsUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    assignment_notifications: bool | None = None
    message_notifications: bool | None = None
    announcement_notifications: bool | None = None
