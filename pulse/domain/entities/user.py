"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"
USER_ROLES = (ROLE_ADMIN, ROLE_USER)


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    email: str
    password: str
    role: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, role: str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role.upper() == role.upper()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)


__all__ = ["ROLE_ADMIN", "ROLE_USER", "USER_ROLES", "User"]
