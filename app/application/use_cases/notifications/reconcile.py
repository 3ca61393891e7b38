"""Merge notification batches into a single ordered, capped aggregate."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from app.domain.entities import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_STATUS,
    STATUS_ALREADY_GENERATED,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_NEW,
    STATUS_REJECTED,
    BRDRequest,
    Comment,
    Notification,
    comment_notification_id,
    status_notification_id,
)
from app.utils import ensure_timestamp

NOTIFICATION_LIMIT = 50

STATUS_MESSAGES: dict[str, str] = {
    STATUS_IN_PROGRESS: "Analyst has started work on the BRD",
    STATUS_ALREADY_GENERATED: "BRD has finished generation",
    STATUS_COMPLETED: "BRD has finished processing",
    STATUS_REJECTED: "BRD has been rejected",
}
DEFAULT_STATUS_MESSAGE = "BRD status has been updated"


def status_message(status: str | None) -> str:
    """Return the human readable phrase announcing ``status``."""

    if status is None:
        return DEFAULT_STATUS_MESSAGE
    return STATUS_MESSAGES.get(status, DEFAULT_STATUS_MESSAGE)


def merge_notifications(
    existing: Sequence[Notification],
    incoming: Iterable[Notification],
    *,
    limit: int = NOTIFICATION_LIMIT,
) -> tuple[list[Notification], int]:
    """Merge ``incoming`` into ``existing`` and return ``(merged, unread_count)``.

    Entries are keyed by ``id``: a known id takes the incoming fields but keeps
    ``read`` if either side already has it, so a notification never goes back
    to unread. The result is sorted newest first and truncated to ``limit``.
    Merging the same batch twice yields the same list.
    """

    merged: dict[str, Notification] = {entry.id: entry for entry in existing}
    for candidate in incoming:
        current = merged.get(candidate.id)
        if current is None:
            merged[candidate.id] = candidate
            continue
        merged[candidate.id] = replace(candidate, read=current.read or candidate.read)

    ordered = sorted(merged.values(), key=lambda entry: entry.timestamp, reverse=True)
    capped = ordered[:limit]
    return capped, count_unread(capped)


def count_unread(notifications: Iterable[Notification]) -> int:
    return sum(1 for entry in notifications if not entry.read)


def build_comment_notifications(
    comments: Iterable[Comment],
    *,
    user_id: int,
    request_id: int,
    request_name: str,
) -> list[Notification]:
    """Map comment rows to notifications addressed to ``user_id``.

    Comments written by the viewer, or addressed to someone else, are skipped.
    """

    notifications: list[Notification] = []
    for comment in comments:
        if comment.id is None:
            continue
        if comment.user_id == user_id:
            continue
        if comment.recipient_id != user_id:
            continue
        notifications.append(
            Notification(
                id=comment_notification_id(comment.id),
                request_id=request_id,
                request_name=request_name,
                type=NOTIFICATION_TYPE_COMMENT,
                message=comment.text,
                timestamp=ensure_timestamp(comment.timestamp),
                read=bool(comment.read),
                user_id=comment.user_id,
                user_name=comment.user_name,
                comment_id=comment.id,
            )
        )
    return notifications


def build_status_notifications(
    requests: Iterable[BRDRequest], *, user_id: int
) -> list[Notification]:
    """Map the viewer's own requests to status change notifications."""

    notifications: list[Notification] = []
    for request in requests:
        if request.id is None or request.created_by != user_id:
            continue
        if request.status == STATUS_NEW:
            continue
        notifications.append(
            Notification(
                id=status_notification_id(request.id),
                request_id=request.id,
                request_name=request.project_name,
                type=NOTIFICATION_TYPE_STATUS,
                message=status_message(request.status),
                timestamp=ensure_timestamp(request.updated_at),
                read=False,
                status=request.status,
            )
        )
    return notifications


__all__ = [
    "DEFAULT_STATUS_MESSAGE",
    "NOTIFICATION_LIMIT",
    "STATUS_MESSAGES",
    "build_comment_notifications",
    "build_status_notifications",
    "count_unread",
    "merge_notifications",
    "status_message",
]
