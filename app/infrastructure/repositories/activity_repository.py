"""Persistence layer for request activity logs."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Activity
from app.infrastructure.models import ActivityModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_naive_datetime


class ActivityRepository:
    """Append and read the activity log of BRD requests."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_request(self, request_id: int) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.request_id == request_id)
            .order_by(ActivityModel.timestamp.desc(), ActivityModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, activity: Activity) -> Activity:
        model = ActivityModel(
            request_id=activity.request_id,
            type=activity.type,
            description=activity.description,
            user_id=activity.user_id,
            user_name=activity.user_name,
            user_role=activity.user_role,
            timestamp=ensure_app_naive_datetime(activity.timestamp)
            or now_in_app_naive_datetime(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            request_id=model.request_id,
            type=model.type,
            description=model.description,
            user_id=model.user_id,
            user_name=model.user_name,
            user_role=model.user_role,
            timestamp=ensure_app_timezone(model.timestamp),
        )


__all__ = ["ActivityRepository"]
