"""Use case for moving a request through its workflow statuses."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.activities.record_activity import record_activity
from app.domain.entities import (
    ACTIVITY_COMPLETION,
    ACTIVITY_STATUS_CHANGE,
    BRDRequest,
    BRD_STATUSES,
    STATUS_COMPLETED,
    User,
)
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository
from app.utils import now_in_app_timezone


def update_request_status(
    session: Session,
    *,
    request_id: int,
    status: str,
    acting_user: User,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Set ``status`` on the request; allowed for admins and the assigned analyst."""

    if status not in BRD_STATUSES:
        raise ValueError(f"Unknown BRD status '{status}'")

    repository = BRDRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ValueError("BRD request not found")

    if not (acting_user.is_admin() or request.assigned_analyst_id == acting_user.id):
        raise PermissionError("Only administrators or the assigned analyst can change the status")

    updated = replace(
        request,
        status=status,
        updated_at=now_in_app_timezone(),
        updated_by=acting_user.id,
    )
    saved = repository.update(updated)
    if status == STATUS_COMPLETED:
        activity_type = ACTIVITY_COMPLETION
        description = f"BRD has been completed by {acting_user.name}"
    else:
        activity_type = ACTIVITY_STATUS_CHANGE
        description = f"Status changed from {request.status} to {status}"
    record_activity(
        session,
        request_id=request_id,
        user=acting_user,
        activity_type=activity_type,
        description=description,
    )
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved
