"""Use cases for attendance tracking."""

from .record_attendance import record_attendance

__all__ = ["record_attendance"]
