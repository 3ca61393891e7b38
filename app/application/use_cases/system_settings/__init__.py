"""Use cases for the application-wide settings."""

from .get_system_settings import get_system_settings, maintenance_block_message
from .update_system_settings import update_system_settings

__all__ = ["get_system_settings", "maintenance_block_message", "update_system_settings"]
