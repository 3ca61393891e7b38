"""Use case for raising a new BRD request."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import BRDRequest, EDITOR_REQUESTER, STATUS_NEW, User
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository
from app.utils import now_in_app_timezone


def create_brd_request(
    session: Session,
    *,
    user: User,
    project_name: str,
    business_unit: str | None = None,
    priority: str | None = None,
    request_type: str | None = None,
    target_date: str | None = None,
    background: str | None = None,
    current_condition: str | None = None,
    expected_condition: str | None = None,
    form_data: Mapping[str, Any] | None = None,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Create a request in status ``New`` owned by ``user``."""

    if not (user.is_requester() or user.is_admin()):
        raise PermissionError("Only business requesters can raise BRD requests")

    normalized_name = project_name.strip()
    if not normalized_name:
        raise ValueError("Project name cannot be empty")

    request = BRDRequest(
        id=None,
        project_name=normalized_name,
        created_by=user.id,
        created_by_name=user.name,
        business_unit=business_unit or user.business_unit,
        status=STATUS_NEW,
        priority=priority,
        request_type=request_type,
        target_date=target_date,
        background=background,
        current_condition=current_condition,
        expected_condition=expected_condition,
        form_data=dict(form_data or {}),
        current_editor=EDITOR_REQUESTER,
        created_at=now_in_app_timezone(),
    )
    saved = BRDRequestRepository(session).create(request)
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved
