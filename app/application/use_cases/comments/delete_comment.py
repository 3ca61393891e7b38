"""Use case for removing a comment from a BRD request."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.notifications import ChangeFeed, change_feed, comments_topic
from app.infrastructure.repositories import CommentRepository

logger = logging.getLogger(__name__)


def delete_comment(
    session: Session,
    *,
    request_id: int,
    comment_id: int,
    user: User,
    feed: ChangeFeed | None = None,
) -> None:
    """Delete a comment written by ``user`` and refresh live queries on the thread."""

    repository = CommentRepository(session)
    comment = repository.get(comment_id)
    if comment is None or comment.request_id != request_id:
        raise ValueError("Comment not found")
    if comment.user_id != user.id:
        raise PermissionError("Only the author can delete a comment")

    repository.delete(comment_id)
    logger.info("User %s deleted comment %s on request %s", user.id, comment_id, request_id)
    (feed or change_feed).publish(comments_topic(request_id))
