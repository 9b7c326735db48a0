"""Public helpers for emitting and reading notifications."""

from .events import NotificationEvent
from .inbox import (
    clear_notifications,
    count_unread_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)
from .policy import FanOutPolicy
from .triggers import (
    notify_account_created,
    notify_announcement_published,
    notify_assignment_created,
    notify_course_request_decided,
    notify_course_requested,
    notify_message_sent,
    notify_student_enrolled,
    notify_submission_graded,
    notify_submission_received,
)
from .writer import DeliveryResult, NotificationWriter

__all__ = [
    "DeliveryResult",
    "FanOutPolicy",
    "NotificationEvent",
    "NotificationWriter",
    "clear_notifications",
    "count_unread_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
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
