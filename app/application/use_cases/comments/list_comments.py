"""Use case for listing the comment thread of a request."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Comment, User
from app.infrastructure.repositories import BRDRequestRepository, CommentRepository

from .access import ensure_can_discuss


def list_comments(session: Session, *, request_id: int, user: User) -> Sequence[Comment]:
    """Return the comments of ``request_id`` newest first."""

    request = BRDRequestRepository(session).get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_discuss(request, user)
    return CommentRepository(session).list_for_request(request_id)
