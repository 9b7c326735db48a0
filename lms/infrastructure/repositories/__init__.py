"""Repository implementations for infrastructure layer."""

from .announcement_repository import AnnouncementRepository
from .assignment_repository import AssignmentRepository, SubmissionRepository
from .attendance_repository import AttendanceRepository
from .conversation_repository import ConversationRepository
from .course_repository import CourseRepository, EnrollmentRepository
from .notification_repository import NotificationRepository
from .role_repository import RoleRepository
from .user_repository import UserRepository
from .user_settings_repository import UserSettingsRepository

__all__ = [
    "AnnouncementRepository",
    "AssignmentRepository",
    "AttendanceRepository",
    "ConversationRepository",
    "CourseRepository",
    "EnrollmentRepository",
    "NotificationRepository",
    "RoleRepository",
    "SubmissionRepository",
    "UserRepository",
    "UserSettingsRepository",
]
