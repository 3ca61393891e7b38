"""Activity log use cases."""

from .record_activity import record_activity
from .list_activities import list_activities

__all__ = ["list_activities", "record_activity"]
