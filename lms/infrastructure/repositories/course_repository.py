"""Persistence helpers for courses and enrollments."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lms.domain.entities import ENROLLMENT_STATUS_ACTIVE, Course, CourseEnrollment
from lms.infrastructure.models import CourseEnrollmentModel, CourseModel


class CourseRepository:
    """Provide CRUD operations for :class:`Course` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, course_id: int) -> Course | None:
        model = self.session.get(CourseModel, course_id)
        return self._to_entity(model) if model else None

    def get_by_code(self, code: str) -> Course | None:
        model = self.session.query(CourseModel).filter(CourseModel.code == code).first()
        return self._to_entity(model) if model else None

    def create(self, course: Course) -> Course:
        model = CourseModel(
            code=course.code,
            name=course.name,
            department=course.department,
            campus=course.campus,
            instructor_id=course.instructor_id,
            status=course.status,
            credit_hours=course.credit_hours,
            request_status=course.request_status,
            request_notes=course.request_notes,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_request_status(
        self,
        course_id: int,
        *,
        request_status: str,
        status: str,
        request_notes: str | None,
    ) -> Course:
        model = self.session.get(CourseModel, course_id)
        if model is None:
            msg = f"Course with id {course_id} not found"
            raise ValueError(msg)
        model.request_status = request_status
        model.status = status
        if request_notes is not None:
            model.request_notes = request_notes
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CourseModel) -> Course:
        return Course(
            id=model.id,
            code=model.code,
            name=model.name,
            department=model.department,
            campus=model.campus,
            instructor_id=model.instructor_id,
            status=model.status,
            credit_hours=model.credit_hours,
            request_status=model.request_status,
            request_notes=model.request_notes,
            created_at=model.created_at,
        )


class EnrollmentRepository:
    """Provide access to :class:`CourseEnrollment` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, *, student_id: int, course_id: int) -> CourseEnrollment | None:
        model = (
            self.session.query(CourseEnrollmentModel)
            .filter(CourseEnrollmentModel.student_id == student_id)
            .filter(CourseEnrollmentModel.course_id == course_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, enrollment: CourseEnrollment) -> CourseEnrollment:
        model = CourseEnrollmentModel(
            student_id=enrollment.student_id,
            course_id=enrollment.course_id,
            status=enrollment.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, enrollment_id: int, status: str) -> CourseEnrollment:
        model = self.session.get(CourseEnrollmentModel, enrollment_id)
        if model is None:
            msg = f"Enrollment with id {enrollment_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_student_ids(
        self, course_id: int, *, status: str | None = ENROLLMENT_STATUS_ACTIVE
    ) -> list[int]:
        query = self.session.query(CourseEnrollmentModel.student_id).filter(
            CourseEnrollmentModel.course_id == course_id
        )
        if status is not None:
            query = query.filter(CourseEnrollmentModel.status == status)
        query = query.order_by(CourseEnrollmentModel.student_id)
        return [student_id for (student_id,) in query.all()]

    @staticmethod
    def _to_entity(model: CourseEnrollmentModel) -> CourseEnrollment:
        return CourseEnrollment(
            id=model.id,
            student_id=model.student_id,
            course_id=model.course_id,
            status=model.status,
            enrolled_at=model.enrolled_at,
        )


__all__ = ["CourseRepository", "EnrollmentRepository"]
