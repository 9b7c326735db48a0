"""ORM models used by the application infrastructure."""

from .announcement import AnnouncementModel
from .assignment import AssignmentModel, AssignmentSubmissionModel
from .attendance import AttendanceModel
from .conversation import (
    ConversationModel,
    ConversationParticipantModel,
    MessageModel,
)
from .course import CourseEnrollmentModel, CourseModel
from .notification import NotificationModel
from .role import RoleModel
from .user import UserModel, UserSettingsModel

__all__ = [
    "AnnouncementModel",
    "AssignmentModel",
    "AssignmentSubmissionModel",
    "AttendanceModel",
    "ConversationModel",
    "ConversationParticipantModel",
    "CourseEnrollmentModel",
    "CourseModel",
    "MessageModel",
    "NotificationModel",
    "RoleModel",
    "UserModel",
    "UserSettingsModel",
]
