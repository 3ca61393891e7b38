"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import ROLE_ADMIN, ROLE_ANALYST, ROLE_REQUESTER, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    password: str
    business_unit: str | None
    position: str | None
    last_login: datetime | None
    created_at: datetime | None
    updated_at: datetime | None
    is_active: bool
    phone: str | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def is_analyst(self) -> bool:
        return self.has_role(ROLE_ANALYST)

    def is_requester(self) -> bool:
        return self.has_role(ROLE_REQUESTER)


__all__ = ["User"]
