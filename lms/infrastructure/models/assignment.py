"""SQLAlchemy models for assignments and submissions."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)

from lms.infrastructure.database import Base


class AssignmentModel(Base):
    """Database representation of an assignment posted to a course."""

    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(
        Integer, ForeignKey("courses.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=False)
    points = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class AssignmentSubmissionModel(Base):
    """Database representation of a student's submission."""

    __tablename__ = "assignment_submissions"
    __table_args__ = (
        UniqueConstraint(
            "assignment_id", "student_id", name="uq_submission_assignment_student"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    assignment_id = Column(
        Integer,
        ForeignKey("assignments.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    submission_text = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="submitted")
    grade = Column(Numeric(6, 2), nullable=True)
    feedback = Column(Text, nullable=True)
    submitted_at = Column(DateTime, nullable=False, server_default=func.now())
    graded_at = Column(DateTime, nullable=True)
    graded_by = Column(Integer, ForeignKey("users.id"), nullable=True)


__all__ = ["AssignmentModel", "AssignmentSubmissionModel"]
