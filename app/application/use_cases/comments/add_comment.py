"""Use case for posting a comment on a BRD request."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import BRDRequest, Comment, User
from app.infrastructure.notifications import ChangeFeed, change_feed, comments_topic
from app.infrastructure.repositories import BRDRequestRepository, CommentRepository
from app.utils import now_in_app_timezone

from .access import ensure_can_discuss


def default_recipient(request: BRDRequest, author: User) -> int | None:
    """Return the counterpart of ``author`` in the requester/analyst pair."""

    if author.id == request.created_by:
        return request.assigned_analyst_id
    if author.id == request.assigned_analyst_id:
        return request.created_by
    # Administrators address the requester.
    return request.created_by


def add_comment(
    session: Session,
    *,
    request_id: int,
    author: User,
    text: str,
    recipient_id: int | None = None,
    feed: ChangeFeed | None = None,
) -> Comment:
    """Store a new unread comment and notify live queries on the request."""

    request = BRDRequestRepository(session).get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_discuss(request, author)

    normalized_text = text.strip()
    if not normalized_text:
        raise ValueError("Comment text cannot be empty")

    if recipient_id is None:
        recipient_id = default_recipient(request, author)
    elif recipient_id == author.id:
        raise ValueError("A comment cannot be addressed to its author")

    comment = Comment(
        id=None,
        request_id=request_id,
        user_id=author.id,
        user_name=author.name,
        user_role=author.role.name,
        text=normalized_text,
        recipient_id=recipient_id,
        read=False,
        timestamp=now_in_app_timezone(),
    )
    saved = CommentRepository(session).create(comment)
    (feed or change_feed).publish(comments_topic(request_id))
    return saved
