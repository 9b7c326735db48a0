"""Persistence helpers for attendance marks."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lms.domain.entities import AttendanceRecord
from lms.infrastructure.models import AttendanceModel


class AttendanceRepository:
    """Stage attendance rows; the caller owns the transaction boundary."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def upsert(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert or update the mark for ``record``'s student and day without committing."""

        model = (
            self.session.query(AttendanceModel)
            .filter(AttendanceModel.course_id == record.course_id)
            .filter(AttendanceModel.student_id == record.student_id)
            .filter(AttendanceModel.date == record.date)
            .first()
        )
        if model is None:
            model = AttendanceModel(
                course_id=record.course_id,
                student_id=record.student_id,
                date=record.date,
            )
        model.status = record.status
        model.recorded_by = record.recorded_by
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_for_course(self, course_id: int, day) -> list[AttendanceRecord]:
        query = (
            self.session.query(AttendanceModel)
            .filter(AttendanceModel.course_id == course_id)
            .filter(AttendanceModel.date == day)
            .order_by(AttendanceModel.student_id)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: AttendanceModel) -> AttendanceRecord:
        return AttendanceRecord(
            id=model.id,
            course_id=model.course_id,
            student_id=model.student_id,
            date=model.date,
            status=model.status,
            recorded_by=model.recorded_by,
        )


__all__ = ["AttendanceRepository"]
