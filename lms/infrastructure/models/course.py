"""SQLAlchemy models for courses and enrollments."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)

from lms.infrastructure.database import Base


class CourseModel(Base):
    """Database representation of a course or a pending course request."""

    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    department = Column(String(255), nullable=False)
    campus = Column(String(50), nullable=False)
    instructor_id = Column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    status = Column(String(20), nullable=False, default="active")
    credit_hours = Column(Integer, nullable=False, default=3)
    request_status = Column(String(20), nullable=False, default="approved")
    request_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class CourseEnrollmentModel(Base):
    """Database representation of a student enrolled in a course."""

    __tablename__ = "course_enrollments"
    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollment_student_course"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status = Column(String(20), nullable=False, default="active")
    enrolled_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["CourseModel", "CourseEnrollmentModel"]
