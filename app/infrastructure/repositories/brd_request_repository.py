"""Persistence helpers for BRD request entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.domain.entities import AssignmentRecord, BRDRequest
from app.infrastructure.models import BRDRequestModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class BRDRequestRepository:
    """Provide CRUD operations and notification queries for BRD requests."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        created_by: int | None = None,
        assigned_analyst_id: int | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[BRDRequest]:
        query = self.session.query(BRDRequestModel)
        if created_by is not None:
            query = query.filter(BRDRequestModel.created_by == created_by)
        if assigned_analyst_id is not None:
            query = query.filter(
                BRDRequestModel.assigned_analyst_id == assigned_analyst_id
            )
        if status is not None:
            query = query.filter(BRDRequestModel.status == status)
        query = query.order_by(BRDRequestModel.created_at.desc(), BRDRequestModel.id.desc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, request_id: int) -> BRDRequest | None:
        model = self.session.get(BRDRequestModel, request_id)
        return self._to_entity(model) if model else None

    def create(self, request: BRDRequest) -> BRDRequest:
        model = BRDRequestModel()
        self._apply_entity_to_model(model, request, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, request: BRDRequest) -> BRDRequest:
        if request.id is None:
            raise ValueError("BRD request id is required for updates")
        model = self.session.get(BRDRequestModel, request.id)
        if model is None:
            msg = f"BRD request with id {request.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, request, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def count_active_for_analyst(
        self, analyst_id: int, statuses: Sequence[str]
    ) -> int:
        return (
            self.session.query(func.count(BRDRequestModel.id))
            .filter(BRDRequestModel.assigned_analyst_id == analyst_id)
            .filter(BRDRequestModel.status.in_(tuple(statuses)))
            .scalar()
            or 0
        )

    def list_linked_names(self, user_id: int) -> dict[int, str]:
        """Return ``{request_id: project_name}`` for requests the user created or works on."""

        query = (
            self.session.query(BRDRequestModel.id, BRDRequestModel.project_name)
            .filter(
                or_(
                    BRDRequestModel.created_by == user_id,
                    BRDRequestModel.assigned_analyst_id == user_id,
                )
            )
            .order_by(BRDRequestModel.id.asc())
        )
        return {request_id: name for request_id, name in query.all()}

    def list_recent_status_changes(
        self,
        *,
        created_by: int,
        since: datetime,
        exclude_status: str,
    ) -> Sequence[BRDRequest]:
        query = (
            self.session.query(BRDRequestModel)
            .filter(BRDRequestModel.created_by == created_by)
            .filter(BRDRequestModel.status != exclude_status)
            .filter(BRDRequestModel.updated_at.isnot(None))
            .filter(BRDRequestModel.updated_at >= ensure_app_naive_datetime(since))
            .order_by(BRDRequestModel.updated_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _apply_entity_to_model(
        model: BRDRequestModel,
        request: BRDRequest,
        *,
        include_creation_fields: bool,
    ) -> None:
        if include_creation_fields:
            model.created_by = request.created_by
            model.created_by_name = request.created_by_name
            if request.created_at is not None:
                model.created_at = ensure_app_naive_datetime(request.created_at)
        model.project_name = request.project_name
        model.business_unit = request.business_unit
        model.status = request.status
        model.priority = request.priority
        model.request_type = request.request_type
        model.target_date = request.target_date
        model.background = request.background
        model.current_condition = request.current_condition
        model.expected_condition = request.expected_condition
        model.assigned_analyst_id = request.assigned_analyst_id
        model.assigned_analyst_name = request.assigned_analyst_name
        model.assigned_at = ensure_app_naive_datetime(request.assigned_at)
        model.assignment_history = [
            _serialize_assignment(record) for record in request.assignment_history
        ]
        model.template_id = request.template_id
        model.template_name = request.template_name
        model.template_sections = list(request.template_sections)
        model.form_data = dict(request.form_data)
        model.generated_content = request.generated_content
        model.current_editor = request.current_editor
        model.updated_at = ensure_app_naive_datetime(request.updated_at)
        model.updated_by = request.updated_by

    @staticmethod
    def _to_entity(model: BRDRequestModel) -> BRDRequest:
        return BRDRequest(
            id=model.id,
            project_name=model.project_name,
            created_by=model.created_by,
            created_by_name=model.created_by_name,
            business_unit=model.business_unit,
            status=model.status,
            priority=model.priority,
            request_type=model.request_type,
            target_date=model.target_date,
            background=model.background,
            current_condition=model.current_condition,
            expected_condition=model.expected_condition,
            assigned_analyst_id=model.assigned_analyst_id,
            assigned_analyst_name=model.assigned_analyst_name,
            assigned_at=ensure_app_timezone(model.assigned_at),
            assignment_history=[
                _deserialize_assignment(entry) for entry in model.assignment_history or []
            ],
            template_id=model.template_id,
            template_name=model.template_name,
            template_sections=list(model.template_sections or []),
            form_data=dict(model.form_data or {}),
            generated_content=model.generated_content,
            current_editor=model.current_editor,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            updated_by=model.updated_by,
        )


def _serialize_assignment(record: AssignmentRecord) -> dict[str, Any]:
    assigned_at = ensure_app_timezone(record.assigned_at)
    return {
        "analyst_id": record.analyst_id,
        "analyst_name": record.analyst_name,
        "assigned_by": record.assigned_by,
        "assigned_by_name": record.assigned_by_name,
        "assigned_at": assigned_at.isoformat() if assigned_at else None,
    }


def _deserialize_assignment(entry: dict[str, Any]) -> AssignmentRecord:
    raw_assigned_at = entry.get("assigned_at")
    assigned_at = (
        datetime.fromisoformat(raw_assigned_at) if isinstance(raw_assigned_at, str) else None
    )
    return AssignmentRecord(
        analyst_id=int(entry["analyst_id"]),
        analyst_name=str(entry.get("analyst_name") or ""),
        assigned_by=int(entry["assigned_by"]),
        assigned_by_name=str(entry.get("assigned_by_name") or ""),
        assigned_at=ensure_app_timezone(assigned_at),
    )


__all__ = ["BRDRequestRepository"]
