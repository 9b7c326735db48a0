"""SQLAlchemy model for attendance marks."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, UniqueConstraint

from lms.infrastructure.database import Base


class AttendanceModel(Base):
    """One status per student, course and day."""

    __tablename__ = "attendance"
    __table_args__ = (
        UniqueConstraint(
            "course_id", "student_id", "date", name="uq_attendance_course_student_date"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(Date, nullable=False)
    status = Column(String(20), nullable=False)
    recorded_by = Column(Integer, ForeignKey("users.id"), nullable=True)


__all__ = ["AttendanceModel"]
