"""SQLAlchemy model for announcements."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from lms.infrastructure.database import Base


class AnnouncementModel(Base):
    """Database representation of an announcement."""

    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    target = Column(String(20), nullable=False, default="all")
    campus = Column(String(50), nullable=False, default="All Campuses")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["AnnouncementModel"]
