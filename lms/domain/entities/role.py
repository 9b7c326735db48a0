"""Domain entity representing a user role."""

from dataclasses import dataclass
from typing import Final

ROLE_STUDENT: Final[str] = "student"
ROLE_TEACHER: Final[str] = "teacher"
ROLE_ADMIN: Final[str] = "admin"

DEFAULT_ROLES: Final[tuple[tuple[str, str], ...]] = (
    ("Student", ROLE_STUDENT),
    ("Faculty", ROLE_TEACHER),
    ("Administrator", ROLE_ADMIN),
)


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "ROLE_STUDENT", "ROLE_TEACHER", "ROLE_ADMIN", "DEFAULT_ROLES"]
