"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .notification_settings import (
    get_notification_settings,
    update_notification_settings,
)
from .record_login import record_login

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "get_notification_settings",
    "record_login",
    "update_notification_settings",
]
