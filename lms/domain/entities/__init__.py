"""Domain entities exposed by the application."""

from .announcement import (
    ANNOUNCEMENT_TARGETS,
    TARGET_ADMINS,
    TARGET_ALL,
    TARGET_STUDENTS,
    TARGET_TEACHERS,
    Announcement,
)
from .assignment import (
    SUBMISSION_STATUS_GRADED,
    SUBMISSION_STATUS_SUBMITTED,
    Assignment,
    AssignmentSubmission,
)
from .attendance import ATTENDANCE_STATUSES, AttendanceRecord
from .conversation import Conversation, Message
from .course import (
    COURSE_STATUS_ACTIVE,
    COURSE_STATUS_INACTIVE,
    ENROLLMENT_STATUS_ACTIVE,
    ENROLLMENT_STATUS_COMPLETED,
    ENROLLMENT_STATUS_DROPPED,
    REQUEST_STATUS_APPROVED,
    REQUEST_STATUS_PENDING,
    REQUEST_STATUS_REJECTED,
    Course,
    CourseEnrollment,
)
from .notification import (
    NOTIFICATION_TYPE_ANNOUNCEMENT,
    NOTIFICATION_TYPE_ASSIGNMENT,
    NOTIFICATION_TYPE_COURSE,
    NOTIFICATION_TYPE_GRADE,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPE_SUBMISSION,
    NOTIFICATION_TYPE_SYSTEM,
    NOTIFICATION_TYPES,
    Notification,
)
from .role import DEFAULT_ROLES, ROLE_ADMIN, ROLE_STUDENT, ROLE_TEACHER, Role
from .user import ALL_CAMPUSES, User
from .user_settings import UserSettings

__all__ = [
    "ALL_CAMPUSES",
    "ANNOUNCEMENT_TARGETS",
    "ATTENDANCE_STATUSES",
    "Announcement",
    "Assignment",
    "AssignmentSubmission",
    "AttendanceRecord",
    "COURSE_STATUS_ACTIVE",
    "COURSE_STATUS_INACTIVE",
    "Conversation",
    "Course",
    "CourseEnrollment",
    "DEFAULT_ROLES",
    "ENROLLMENT_STATUS_ACTIVE",
    "ENROLLMENT_STATUS_COMPLETED",
    "ENROLLMENT_STATUS_DROPPED",
    "Message",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_ANNOUNCEMENT",
    "NOTIFICATION_TYPE_ASSIGNMENT",
    "NOTIFICATION_TYPE_COURSE",
    "NOTIFICATION_TYPE_GRADE",
    "NOTIFICATION_TYPE_MESSAGE",
    "NOTIFICATION_TYPE_SUBMISSION",
    "NOTIFICATION_TYPE_SYSTEM",
    "Notification",
    "REQUEST_STATUS_APPROVED",
    "REQUEST_STATUS_PENDING",
    "REQUEST_STATUS_REJECTED",
    "ROLE_ADMIN",
    "ROLE_STUDENT",
    "ROLE_TEACHER",
    "Role",
    "SUBMISSION_STATUS_GRADED",
    "SUBMISSION_STATUS_SUBMITTED",
    "TARGET_ADMINS",
    "TARGET_ALL",
    "TARGET_STUDENTS",
    "TARGET_TEACHERS",
    "User",
    "UserSettings",
]
