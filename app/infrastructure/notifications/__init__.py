"""Realtime notification helpers for the infrastructure layer."""

from .live_queries import (
    BRD_REQUESTS_TOPIC,
    ChangeFeed,
    LiveQuerySubscription,
    change_feed,
    comments_topic,
)

__all__ = [
    "BRD_REQUESTS_TOPIC",
    "ChangeFeed",
    "LiveQuerySubscription",
    "change_feed",
    "comments_topic",
]
