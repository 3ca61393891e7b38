"""Domain entity representing a user role."""

from dataclasses import dataclass

ROLE_REQUESTER = "requester"
ROLE_ANALYST = "analyst"
ROLE_ADMIN = "admin"

ROLE_NAMES: dict[str, str] = {
    ROLE_REQUESTER: "Business Requester",
    ROLE_ANALYST: "Business Analyst",
    ROLE_ADMIN: "Administrator",
}


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    alias: str


__all__ = ["Role", "ROLE_ADMIN", "ROLE_ANALYST", "ROLE_NAMES", "ROLE_REQUESTER"]
