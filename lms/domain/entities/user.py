"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime
from typing import Final

from .role import ROLE_ADMIN, ROLE_STUDENT, ROLE_TEACHER, Role

ALL_CAMPUSES: Final[str] = "All Campuses"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    campus: str
    is_active: bool = True
    created_at: datetime | None = None
    last_login: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        return self.has_role(ROLE_ADMIN)

    def is_teacher(self) -> bool:
        return self.has_role(ROLE_TEACHER)

    def is_student(self) -> bool:
        return self.has_role(ROLE_STUDENT)


__all__ = ["User", "ALL_CAMPUSES"]
