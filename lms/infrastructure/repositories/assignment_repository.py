"""Persistence helpers for assignments and submissions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from lms.domain.entities import (
    SUBMISSION_STATUS_GRADED,
    Assignment,
    AssignmentSubmission,
)
from lms.infrastructure.models import AssignmentModel, AssignmentSubmissionModel


class AssignmentRepository:
    """Provide CRUD operations for :class:`Assignment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, assignment_id: int) -> Assignment | None:
        model = self.session.get(AssignmentModel, assignment_id)
        return self._to_entity(model) if model else None

    def create(self, assignment: Assignment) -> Assignment:
        model = AssignmentModel(
            course_id=assignment.course_id,
            title=assignment.title,
            description=assignment.description,
            due_date=assignment.due_date,
            points=assignment.points,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AssignmentModel) -> Assignment:
        return Assignment(
            id=model.id,
            course_id=model.course_id,
            title=model.title,
            description=model.description,
            due_date=model.due_date,
            points=model.points,
            created_at=model.created_at,
        )


class SubmissionRepository:
    """Provide CRUD operations for :class:`AssignmentSubmission` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, submission_id: int) -> AssignmentSubmission | None:
        model = self.session.get(AssignmentSubmissionModel, submission_id)
        return self._to_entity(model) if model else None

    def get_by_assignment_and_student(
        self, *, assignment_id: int, student_id: int
    ) -> AssignmentSubmission | None:
        model = (
            self.session.query(AssignmentSubmissionModel)
            .filter(AssignmentSubmissionModel.assignment_id == assignment_id)
            .filter(AssignmentSubmissionModel.student_id == student_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, submission: AssignmentSubmission) -> AssignmentSubmission:
        model = AssignmentSubmissionModel(
            assignment_id=submission.assignment_id,
            student_id=submission.student_id,
            submission_text=submission.submission_text,
            status=submission.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def grade(
        self,
        submission_id: int,
        *,
        grade: Decimal,
        feedback: str | None,
        graded_by: int,
        graded_at: datetime,
    ) -> AssignmentSubmission:
        model = self.session.get(AssignmentSubmissionModel, submission_id)
        if model is None:
            msg = f"Submission with id {submission_id} not found"
            raise ValueError(msg)
        model.grade = grade
        model.feedback = feedback
        model.graded_by = graded_by
        model.graded_at = graded_at
        model.status = SUBMISSION_STATUS_GRADED
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AssignmentSubmissionModel) -> AssignmentSubmission:
        return AssignmentSubmission(
            id=model.id,
            assignment_id=model.assignment_id,
            student_id=model.student_id,
            submission_text=model.submission_text,
            status=model.status,
            grade=model.grade,
            feedback=model.feedback,
            submitted_at=model.submitted_at,
            graded_at=model.graded_at,
            graded_by=model.graded_by,
        )


__all__ = ["AssignmentRepository", "SubmissionRepository"]
