"""Recipient resolution for each notification-producing event."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from lms.domain.entities import (
    ALL_CAMPUSES,
    NOTIFICATION_TYPE_ANNOUNCEMENT,
    NOTIFICATION_TYPE_ASSIGNMENT,
    NOTIFICATION_TYPE_COURSE,
    NOTIFICATION_TYPE_GRADE,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_SUBMISSION,
    NOTIFICATION_TYPE_SYSTEM,
    ROLE_ADMIN,
    ROLE_STUDENT,
    ROLE_TEACHER,
    TARGET_ADMINS,
    TARGET_ALL,
    TARGET_STUDENTS,
    TARGET_TEACHERS,
    Announcement,
    AssignmentSubmission,
    Course,
    UserSettings,
)
from lms.infrastructure.repositories import (
    ConversationRepository,
    EnrollmentRepository,
    UserRepository,
    UserSettingsRepository,
)

_TARGET_ROLES: dict[str, str] = {
    TARGET_ALL: ROLE_STUDENT,
    TARGET_STUDENTS: ROLE_STUDENT,
    TARGET_TEACHERS: ROLE_TEACHER,
    TARGET_ADMINS: ROLE_ADMIN,
}

_PREFERENCE_FIELDS: dict[str, str] = {
    NOTIFICATION_TYPE_ASSIGNMENT: "assignment_notifications",
    NOTIFICATION_TYPE_SUBMISSION: "assignment_notifications",
    NOTIFICATION_TYPE_MESSAGE: "message_notifications",
    NOTIFICATION_TYPE_ANNOUNCEMENT: "announcement_notifications",
}


def wants_notification(settings: UserSettings, notification_type: str) -> bool:
    """Return whether ``settings`` allow notifications of ``notification_type``."""

    field = _PREFERENCE_FIELDS.get(notification_type)
    if field is None:
        return True
    return bool(getattr(settings, field))


class FanOutPolicy:
    """Resolve the users that must receive the notification for an event.

    Every method returns a de-duplicated list of active user ids in a stable
    order, already filtered by the recipients' notification preferences.
    An empty list is a valid answer.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.settings = UserSettingsRepository(session)

    def assignment_created(self, course_id: int) -> list[int]:
        student_ids = EnrollmentRepository(self.session).list_student_ids(course_id)
        return self._deliverable(student_ids, NOTIFICATION_TYPE_ASSIGNMENT)

    def submission_graded(self, submission: AssignmentSubmission) -> list[int]:
        return self._deliverable([submission.student_id], NOTIFICATION_TYPE_GRADE)

    def submission_received(self, course: Course) -> list[int]:
        return self._deliverable([course.instructor_id], NOTIFICATION_TYPE_SUBMISSION)

    def announcement_published(self, announcement: Announcement) -> list[int]:
        role_alias = _TARGET_ROLES.get(announcement.target)
        if role_alias is None:
            msg = f"Unknown announcement target '{announcement.target}'"
            raise ValueError(msg)
        campus = None if announcement.campus in (None, ALL_CAMPUSES) else announcement.campus
        user_ids = self.users.list_ids(
            role_alias=role_alias,
            campus=campus,
            exclude_ids=[announcement.author_id],
        )
        return self._deliverable(user_ids, NOTIFICATION_TYPE_ANNOUNCEMENT)

    def course_request_submitted(self) -> list[int]:
        admin_ids = self.users.list_ids(role_alias=ROLE_ADMIN)
        return self._deliverable(admin_ids, NOTIFICATION_TYPE_COURSE)

    def course_request_decided(self, course: Course) -> list[int]:
        return self._deliverable([course.instructor_id], NOTIFICATION_TYPE_COURSE)

    def course_available(self, course: Course) -> list[int]:
        campus = None if course.campus in (None, ALL_CAMPUSES) else course.campus
        student_ids = self.users.list_ids(role_alias=ROLE_STUDENT, campus=campus)
        return self._deliverable(student_ids, NOTIFICATION_TYPE_COURSE)

    def student_enrolled(self, course: Course) -> list[int]:
        return self._deliverable([course.instructor_id], NOTIFICATION_TYPE_COURSE)

    def message_sent(self, conversation_id: int, sender_id: int) -> list[int]:
        participant_ids = ConversationRepository(self.session).list_participant_ids(
            conversation_id
        )
        recipients = [user_id for user_id in participant_ids if user_id != sender_id]
        return self._deliverable(recipients, NOTIFICATION_TYPE_MESSAGE)

    def system(self, user_ids: Iterable[int]) -> list[int]:
        return self._deliverable(user_ids, NOTIFICATION_TYPE_SYSTEM)

    def _deliverable(self, user_ids: Iterable[int | None], notification_type: str) -> list[int]:
        ordered: list[int] = []
        seen: set[int] = set()
        for user_id in user_ids:
            if user_id is None or user_id in seen:
                continue
            seen.add(user_id)
            ordered.append(user_id)
        if not ordered:
            return []

        users = self.users.get_map_by_ids(ordered)
        preferences = self.settings.get_map(ordered)
        return [
            user_id
            for user_id in ordered
            if user_id in users
            and users[user_id].is_active
            and wants_notification(preferences[user_id], notification_type)
        ]


__all__ = ["FanOutPolicy", "wants_notification"]
