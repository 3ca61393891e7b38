"""Use case for appending to the activity log of a request."""

from sqlalchemy.orm import Session

from app.domain.entities import Activity, User
from app.infrastructure.repositories import ActivityRepository
from app.utils import now_in_app_timezone


def record_activity(
    session: Session,
    *,
    request_id: int,
    user: User,
    activity_type: str,
    description: str,
) -> Activity:
    """Store an activity performed by ``user`` on the request."""

    return ActivityRepository(session).create(
        Activity(
            id=None,
            request_id=request_id,
            type=activity_type,
            description=description,
            user_id=user.id,
            user_name=user.name,
            user_role=user.role.name,
            timestamp=now_in_app_timezone(),
        )
    )
