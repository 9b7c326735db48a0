"""Use cases for announcements."""

from .publish_announcement import publish_announcement, update_announcement

__all__ = ["publish_announcement", "update_announcement"]
