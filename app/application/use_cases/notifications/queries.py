"""Store queries feeding the notification aggregate."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import STATUS_NEW, Notification
from app.infrastructure.repositories import BRDRequestRepository, CommentRepository
from app.utils import window_start

from .reconcile import (
    build_comment_notifications,
    build_status_notifications,
    merge_notifications,
)


def load_linked_requests(session: Session, user_id: int) -> dict[int, str]:
    """Return the requests ``user_id`` created or is assigned to, with their names."""

    return BRDRequestRepository(session).list_linked_names(user_id)


def recent_comment_notifications(
    session: Session,
    *,
    user_id: int,
    request_id: int,
    request_name: str,
    window_days: int,
) -> list[Notification]:
    comments = CommentRepository(session).list_for_request(
        request_id, since=window_start(window_days)
    )
    return build_comment_notifications(
        comments,
        user_id=user_id,
        request_id=request_id,
        request_name=request_name,
    )


def recent_status_notifications(
    session: Session, *, user_id: int, window_days: int
) -> list[Notification]:
    requests = BRDRequestRepository(session).list_recent_status_changes(
        created_by=user_id,
        since=window_start(window_days),
        exclude_status=STATUS_NEW,
    )
    return build_status_notifications(requests, user_id=user_id)


def collect_notifications(
    session: Session,
    *,
    user_id: int,
    limit: int,
    window_days: int,
) -> tuple[list[Notification], int]:
    """Build the reconciled notification list once, without live updates."""

    notifications: list[Notification] = []
    unread_count = 0
    for request_id, request_name in load_linked_requests(session, user_id).items():
        batch = recent_comment_notifications(
            session,
            user_id=user_id,
            request_id=request_id,
            request_name=request_name,
            window_days=window_days,
        )
        notifications, unread_count = merge_notifications(notifications, batch, limit=limit)
    status_batch = recent_status_notifications(
        session, user_id=user_id, window_days=window_days
    )
    notifications, unread_count = merge_notifications(
        notifications, status_batch, limit=limit
    )
    return notifications, unread_count


__all__ = [
    "collect_notifications",
    "load_linked_requests",
    "recent_comment_notifications",
    "recent_status_notifications",
]
