"""Domain entity holding the application-wide settings."""

from dataclasses import dataclass
from datetime import datetime

GENERAL_SETTINGS_KEY = "general"
DEFAULT_MAINTENANCE_MESSAGE = (
    "We are currently performing system maintenance. Please check back later."
)


@dataclass
class SystemSettings:
    """Settings administrators change at runtime."""

    maintenance_mode: bool = False
    maintenance_message: str = DEFAULT_MAINTENANCE_MESSAGE
    updated_at: datetime | None = None
    updated_by: int | None = None


__all__ = ["DEFAULT_MAINTENANCE_MESSAGE", "GENERAL_SETTINGS_KEY", "SystemSettings"]
