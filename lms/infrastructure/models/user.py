"""SQLAlchemy models for users and their notification preferences."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from lms.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a student, teacher or administrator."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    campus = Column(String(50), nullable=False, index=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    last_login = Column(DateTime, nullable=True)

    role = relationship("RoleModel", lazy="joined")
    settings = relationship(
        "UserSettingsModel",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserSettingsModel(Base):
    """Per-user notification switches; a missing row means all enabled."""

    __tablename__ = "user_settings"

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    assignment_notifications = Column(Boolean, nullable=False, default=True)
    message_notifications = Column(Boolean, nullable=False, default=True)
    announcement_notifications = Column(Boolean, nullable=False, default=True)

    user = relationship("UserModel", back_populates="settings")


__all__ = ["UserModel", "UserSettingsModel"]
