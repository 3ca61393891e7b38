"""Use cases for reading BRD requests."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import BRDRequest, User
from app.infrastructure.repositories import BRDRequestRepository

from .access import ensure_can_view


def get_brd_request(session: Session, *, request_id: int, user: User) -> BRDRequest:
    """Return the request identified by ``request_id`` if ``user`` may see it."""

    request = BRDRequestRepository(session).get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_view(request, user)
    return request


def list_brd_requests(
    session: Session,
    *,
    user: User,
    status: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> Sequence[BRDRequest]:
    """Return the requests visible to ``user``, newest first.

    Requesters see what they raised, analysts what they are assigned to and
    administrators every request.
    """

    repository = BRDRequestRepository(session)
    if user.is_admin():
        return repository.list(status=status, skip=skip, limit=limit)
    if user.is_analyst():
        return repository.list(
            assigned_analyst_id=user.id, status=status, skip=skip, limit=limit
        )
    return repository.list(created_by=user.id, status=status, skip=skip, limit=limit)
