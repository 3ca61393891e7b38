"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    ensure_timestamp,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    window_start,
)

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "ensure_timestamp",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "window_start",
]
