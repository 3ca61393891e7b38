"""Notification aggregation and read-state helpers."""

from .center import NotificationCenter
from .queries import (
    collect_notifications,
    load_linked_requests,
    recent_comment_notifications,
    recent_status_notifications,
)
from .reconcile import (
    DEFAULT_STATUS_MESSAGE,
    NOTIFICATION_LIMIT,
    STATUS_MESSAGES,
    build_comment_notifications,
    build_status_notifications,
    count_unread,
    merge_notifications,
    status_message,
)

__all__ = [
    "DEFAULT_STATUS_MESSAGE",
    "NOTIFICATION_LIMIT",
    "NotificationCenter",
    "STATUS_MESSAGES",
    "build_comment_notifications",
    "build_status_notifications",
    "collect_notifications",
    "count_unread",
    "load_linked_requests",
    "merge_notifications",
    "recent_comment_notifications",
    "recent_status_notifications",
    "status_message",
]
