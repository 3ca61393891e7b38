"""Use case for persisting the read flag of a comment."""

from sqlalchemy.orm import Session

from app.infrastructure.notifications import ChangeFeed, change_feed, comments_topic
from app.infrastructure.repositories import CommentRepository


def mark_comment_read(
    session: Session,
    *,
    request_id: int,
    comment_id: int,
    feed: ChangeFeed | None = None,
) -> bool:
    """Flag the comment as read; return ``False`` when it does not exist."""

    updated = CommentRepository(session).mark_as_read(comment_id, request_id=request_id)
    if updated:
        (feed or change_feed).publish(comments_topic(request_id))
    return updated
