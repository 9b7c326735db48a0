from .announcement import AnnouncementRead, AnnouncementWrite
from .assignment import (
    AssignmentCreate,
    AssignmentRead,
    SubmissionCreate,
    SubmissionGrade,
    SubmissionRead,
)
from .auth import Token
from .conversation import ConversationCreate, ConversationRead, MessageCreate, MessageRead
from .course import (
    AttendanceCreate,
    AttendanceMark,
    AttendanceRead,
    CourseRead,
    CourseRequestCreate,
    CourseRequestDecision,
    EnrollmentRead,
)
from .notification import MessageResponse, NotificationCount, NotificationRead
from .user import (
    NotificationSettingsRead,
    NotificationSettingsUpdate,
    RoleRead,
    UserCreate,
    UserRead,
)

__all__ = [
    "AnnouncementRead",
    "AnnouncementWrite",
    "AssignmentCreate",
    "AssignmentRead",
    "AttendanceCreate",
    "AttendanceMark",
    "AttendanceRead",
    "ConversationCreate",
    "ConversationRead",
    "CourseRead",
    "CourseRequestCreate",
    "CourseRequestDecision",
    "EnrollmentRead",
    "MessageCreate",
    "MessageRead",
    "MessageResponse",
    "NotificationCount",
    "NotificationRead",
    "NotificationSettingsRead",
    "NotificationSettingsUpdate",
    "RoleRead",
    "SubmissionCreate",
    "SubmissionGrade",
    "SubmissionRead",
    "Token",
    "UserCreate",
    "UserRead",
]
