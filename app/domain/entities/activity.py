"""Domain entity describing an entry of a request's activity log."""

from dataclasses import dataclass
from datetime import datetime

ACTIVITY_FORM_UPDATE = "form_update"
ACTIVITY_BRD_GENERATED = "brd_generated"
ACTIVITY_STATUS_CHANGE = "status_change"
ACTIVITY_COMPLETION = "completion"


@dataclass
class Activity:
    """Something a participant did on a BRD request."""

    id: int | None
    request_id: int
    type: str
    description: str
    user_id: int
    user_name: str
    user_role: str | None
    timestamp: datetime | None = None


__all__ = [
    "ACTIVITY_BRD_GENERATED",
    "ACTIVITY_COMPLETION",
    "ACTIVITY_FORM_UPDATE",
    "ACTIVITY_STATUS_CHANGE",
    "Activity",
]
