"""Use case for saving form values and handing the turn over."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.application.use_cases.activities.record_activity import record_activity
from app.domain.entities import ACTIVITY_FORM_UPDATE, BRDRequest, User
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository
from app.utils import now_in_app_timezone

from .access import ensure_can_edit, next_editor


def save_form_data(
    session: Session,
    *,
    request_id: int,
    values: Mapping[str, Any],
    user: User,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Merge ``values`` into the request form and pass the turn to the other party."""

    repository = BRDRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_edit(request, user)

    updated = replace(
        request,
        form_data={**request.form_data, **values},
        current_editor=next_editor(request.current_editor),
        updated_at=now_in_app_timezone(),
        updated_by=user.id,
    )
    saved = repository.update(updated)
    record_activity(
        session,
        request_id=request_id,
        user=user,
        activity_type=ACTIVITY_FORM_UPDATE,
        description=(
            f"Form updated and transferred from {request.current_editor} "
            f"to {saved.current_editor}"
        ),
    )
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved
