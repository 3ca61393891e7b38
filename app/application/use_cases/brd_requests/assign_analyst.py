"""Use case for assigning a business analyst to a request."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    ACTIVE_ASSIGNMENT_STATUSES,
    AssignmentRecord,
    BRDRequest,
    STATUS_PENDING_REVIEW,
    User,
)
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository, UserRepository
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def assign_analyst(
    session: Session,
    *,
    request_id: int,
    analyst_id: int,
    acting_user: User,
    max_active: int | None = None,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Assign ``analyst_id`` to the request and move it to ``Pending Review``.

    Raises:
        PermissionError: If ``acting_user`` is not an administrator.
        ValueError: If the request or analyst is unknown, or the analyst
            already carries the maximum number of active requests.
    """

    if not acting_user.is_admin():
        raise PermissionError("Only administrators can assign analysts")

    repository = BRDRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ValueError("BRD request not found")

    analyst = UserRepository(session).get(analyst_id)
    if analyst is None or not analyst.is_active or not analyst.is_analyst():
        raise ValueError("Business analyst not found")
    if request.assigned_analyst_id == analyst.id:
        raise ValueError("The analyst is already assigned to this request")

    limit = max_active if max_active is not None else get_settings().max_projects_per_analyst
    active = repository.count_active_for_analyst(analyst.id, ACTIVE_ASSIGNMENT_STATUSES)
    if active >= limit:
        raise ValueError(
            f"The analyst already has {active} active requests; choose another analyst"
        )

    now = now_in_app_timezone()
    record = AssignmentRecord(
        analyst_id=analyst.id,
        analyst_name=analyst.name,
        assigned_by=acting_user.id,
        assigned_by_name=acting_user.name,
        assigned_at=now,
    )
    updated = replace(
        request,
        assigned_analyst_id=analyst.id,
        assigned_analyst_name=analyst.name,
        assigned_at=now,
        assignment_history=[*request.assignment_history, record],
        status=STATUS_PENDING_REVIEW,
        updated_at=now,
        updated_by=acting_user.id,
    )
    saved = repository.update(updated)
    logger.info("Request %s assigned to analyst %s", request_id, analyst.id)
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved
