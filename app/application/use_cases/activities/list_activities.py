"""Use case for reading the activity log of a request."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.application.use_cases.brd_requests.access import ensure_can_view
from app.domain.entities import Activity, User
from app.infrastructure.repositories import ActivityRepository, BRDRequestRepository


def list_activities(session: Session, *, request_id: int, user: User) -> Sequence[Activity]:
    """Return the activities of a request visible to ``user``, newest first."""

    request = BRDRequestRepository(session).get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_view(request, user)
    return ActivityRepository(session).list_for_request(request_id)
