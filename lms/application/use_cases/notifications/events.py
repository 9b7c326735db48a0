"""Domain events that produce notifications and the text rendered for them.

The wording is fixed when the event is built, so later edits to the
assignment, course or announcement never rewrite notifications already sent.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from lms.domain.entities import (
    NOTIFICATION_TYPE_ANNOUNCEMENT,
    NOTIFICATION_TYPE_ASSIGNMENT,
    NOTIFICATION_TYPE_COURSE,
    NOTIFICATION_TYPE_GRADE,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_SUBMISSION,
    NOTIFICATION_TYPE_SYSTEM,
    REQUEST_STATUS_APPROVED,
    Announcement,
    Assignment,
    Course,
)


@dataclass(frozen=True)
class NotificationEvent:
    """Everything needed to write one notification row per recipient."""

    type: str
    title: str
    message: str
    related_id: int | None = None
    actor_name: str | None = None
    subject_title: str | None = None


def format_due_date(value: date | datetime) -> str:
    """Render ``value`` as ``Jun 1, 2025``."""

    return f"{value:%b} {value.day}, {value.year}"


def grade_percentage(grade: Decimal | float | int, points: int) -> Decimal:
    """Return ``grade / points * 100`` rounded to one decimal place."""

    if points <= 0:
        raise ValueError("Assignment points must be greater than zero")
    ratio = Decimal(str(grade)) / Decimal(points) * 100
    return ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def assignment_created(assignment: Assignment, course: Course) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_ASSIGNMENT,
        title="New Assignment Posted",
        message=(
            f'A new assignment "{assignment.title}" has been posted in {course.name}. '
            f"Due: {format_due_date(assignment.due_date)}."
        ),
        related_id=assignment.id,
        subject_title=assignment.title,
    )


def submission_graded(
    assignment: Assignment, course: Course, *, grade: Decimal, grader_name: str
) -> NotificationEvent:
    percentage = grade_percentage(grade, assignment.points)
    return NotificationEvent(
        type=NOTIFICATION_TYPE_GRADE,
        title="Assignment Graded",
        message=(
            f'Your assignment "{assignment.title}" has been graded. '
            f"You received {percentage:.1f}%."
        ),
        related_id=assignment.id,
        actor_name=grader_name,
        subject_title=assignment.title,
    )


def submission_received(
    assignment: Assignment, course: Course, *, student_name: str
) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_SUBMISSION,
        title=f"New Submission from {student_name}"[:100],
        message=(
            f'{student_name} has submitted the assignment "{assignment.title}" '
            f"for {course.code}: {course.name}."
        ),
        related_id=assignment.id,
        actor_name=student_name,
        subject_title=assignment.title,
    )


def announcement_published(
    announcement: Announcement, *, author_name: str, is_update: bool = False
) -> NotificationEvent:
    if is_update:
        title = "Announcement Update"
        message = f'{author_name} updated an announcement: "{announcement.title}"'
    else:
        title = "New Announcement"
        message = f'{author_name} posted a new announcement: "{announcement.title}"'
    return NotificationEvent(
        type=NOTIFICATION_TYPE_ANNOUNCEMENT,
        title=title,
        message=message,
        related_id=announcement.id,
        actor_name=author_name,
        subject_title=announcement.title,
    )


def course_request_submitted(course: Course, *, faculty_name: str) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_COURSE,
        title="New Course Request",
        message=(
            f'{faculty_name} has requested a new course "{course.code}: {course.name}". '
            "Please review."
        ),
        related_id=course.id,
        actor_name=faculty_name,
        subject_title=course.name,
    )


def course_request_decided(course: Course, *, admin_name: str) -> NotificationEvent:
    approved = course.request_status == REQUEST_STATUS_APPROVED
    decision = "approved" if approved else "rejected"
    message = f'Your request for the course "{course.code}: {course.name}" has been {decision}.'
    if course.request_notes:
        message = f"{message} Notes: {course.request_notes}"
    return NotificationEvent(
        type=NOTIFICATION_TYPE_COURSE,
        title=f"Course Request {decision.capitalize()}",
        message=message,
        related_id=course.id,
        actor_name=admin_name,
        subject_title=course.name,
    )


def course_available(course: Course, *, instructor_name: str) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_COURSE,
        title="New Course Available",
        message=(
            f'A new course "{course.name}" taught by {instructor_name} '
            "is now available for enrollment."
        ),
        related_id=course.id,
        actor_name=instructor_name,
        subject_title=course.name,
    )


def student_enrolled(course: Course, *, student_name: str) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_COURSE,
        title="New Course Enrollment",
        message=f'{student_name} has enrolled in your course "{course.code}: {course.name}".',
        related_id=course.id,
        actor_name=student_name,
        subject_title=course.name,
    )


def message_sent(*, conversation_id: int, sender_name: str) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_MESSAGE,
        title="New Message",
        message=f"You have received a new message from {sender_name}.",
        related_id=conversation_id,
        actor_name=sender_name,
    )


def account_created(*, user_name: str) -> NotificationEvent:
    return NotificationEvent(
        type=NOTIFICATION_TYPE_SYSTEM,
        title="Welcome",
        message=f"Welcome, {user_name}! Your learning management account is ready.",
    )


__all__ = [
    "NotificationEvent",
    "account_created",
    "announcement_published",
    "assignment_created",
    "course_available",
    "course_request_decided",
    "course_request_submitted",
    "format_due_date",
    "grade_percentage",
    "message_sent",
    "student_enrolled",
    "submission_graded",
    "submission_received",
]
