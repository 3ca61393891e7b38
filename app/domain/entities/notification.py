"""Domain entity representing a derived user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TYPE_COMMENT = "comment"
NOTIFICATION_TYPE_STATUS = "status"


def comment_notification_id(comment_id: int) -> str:
    return f"comment_{comment_id}"


def status_notification_id(request_id: int) -> str:
    return f"status_{request_id}"


@dataclass
class Notification:
    """Comment or status change surfaced to a user.

    Notifications are rebuilt from comments and request statuses on every
    emission of a live query; only the ``read`` flag of comment notifications
    is stored (on the comment itself).
    """

    id: str
    request_id: int
    request_name: str
    type: str
    message: str
    timestamp: datetime
    read: bool = False
    user_id: int | None = None
    user_name: str | None = None
    comment_id: int | None = None
    status: str | None = None

    @property
    def is_comment(self) -> bool:
        return self.type == NOTIFICATION_TYPE_COMMENT


__all__ = [
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_STATUS",
    "Notification",
    "comment_notification_id",
    "status_notification_id",
]
