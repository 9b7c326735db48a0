"""Emit the notifications that follow each domain event.

Callers invoke these helpers after their own change has been committed, so a
notification is never written for an operation that did not happen.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import wraps
from typing import TypeVar

from sqlalchemy.orm import Session

from lms.domain.entities import (
    REQUEST_STATUS_APPROVED,
    Announcement,
    Assignment,
    AssignmentSubmission,
    Course,
    User,
)
from lms.infrastructure.repositories import UserRepository

from . import events
from .policy import FanOutPolicy
from .writer import DeliveryResult, NotificationWriter

logger = logging.getLogger(__name__)

_Trigger = TypeVar("_Trigger", bound=Callable[..., list[DeliveryResult]])


def _best_effort(trigger: _Trigger) -> _Trigger:
    """Never let a notification failure reach the caller of ``trigger``.

    The triggering change is already committed when a trigger runs, so any
    error while resolving recipients or building the event is rolled back and
    logged, and the trigger reports no deliveries.
    """

    @wraps(trigger)
    def wrapper(session: Session, **kwargs):
        try:
            return trigger(session, **kwargs)
        except Exception:  # noqa: BLE001
            session.rollback()
            logger.exception("Failed to emit notifications from %s", trigger.__name__)
            return []

    return wrapper  # type: ignore[return-value]


def _dispatch(
    session: Session, event: events.NotificationEvent, recipients: Iterable[int]
) -> list[DeliveryResult]:
    return NotificationWriter(session).notify(event, recipients)


def _user_name(session: Session, user_id: int | None) -> str:
    user = UserRepository(session).get(user_id) if user_id is not None else None
    return user.name if user else "Unknown user"


@_best_effort
def notify_assignment_created(
    session: Session, *, assignment: Assignment, course: Course
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).assignment_created(course.id)
    return _dispatch(session, events.assignment_created(assignment, course), recipients)


@_best_effort
def notify_submission_received(
    session: Session,
    *,
    assignment: Assignment,
    course: Course,
    student: User,
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).submission_received(course)
    event = events.submission_received(assignment, course, student_name=student.name)
    return _dispatch(session, event, recipients)


@_best_effort
def notify_submission_graded(
    session: Session,
    *,
    submission: AssignmentSubmission,
    assignment: Assignment,
    course: Course,
    grader: User,
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).submission_graded(submission)
    event = events.submission_graded(
        assignment, course, grade=submission.grade, grader_name=grader.name
    )
    return _dispatch(session, event, recipients)


@_best_effort
def notify_announcement_published(
    session: Session,
    *,
    announcement: Announcement,
    author: User,
    is_update: bool = False,
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).announcement_published(announcement)
    event = events.announcement_published(
        announcement, author_name=author.name, is_update=is_update
    )
    return _dispatch(session, event, recipients)


@_best_effort
def notify_course_requested(
    session: Session, *, course: Course, faculty: User
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).course_request_submitted()
    event = events.course_request_submitted(course, faculty_name=faculty.name)
    return _dispatch(session, event, recipients)


@_best_effort
def notify_course_request_decided(
    session: Session, *, course: Course, admin: User
) -> list[DeliveryResult]:
    """Tell the requesting faculty member about the decision.

    An approval additionally announces the course to the students of its campus.
    """

    policy = FanOutPolicy(session)
    results = _dispatch(
        session,
        events.course_request_decided(course, admin_name=admin.name),
        policy.course_request_decided(course),
    )
    if course.request_status == REQUEST_STATUS_APPROVED:
        instructor_name = _user_name(session, course.instructor_id)
        results.extend(
            _dispatch(
                session,
                events.course_available(course, instructor_name=instructor_name),
                policy.course_available(course),
            )
        )
    return results


@_best_effort
def notify_student_enrolled(
    session: Session, *, course: Course, student: User
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).student_enrolled(course)
    event = events.student_enrolled(course, student_name=student.name)
    return _dispatch(session, event, recipients)


@_best_effort
def notify_message_sent(
    session: Session, *, conversation_id: int, sender: User
) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).message_sent(conversation_id, sender.id)
    event = events.message_sent(conversation_id=conversation_id, sender_name=sender.name)
    return _dispatch(session, event, recipients)


@_best_effort
def notify_account_created(session: Session, *, user: User) -> list[DeliveryResult]:
    recipients = FanOutPolicy(session).system([user.id])
    return _dispatch(session, events.account_created(user_name=user.name), recipients)


__all__ = [
    "notify_account_created",
    "notify_announcement_published",
    "notify_assignment_created",
    "notify_course_request_decided",
    "notify_course_requested",
    "notify_message_sent",
    "notify_student_enrolled",
    "notify_submission_graded",
    "notify_submission_received",
]
