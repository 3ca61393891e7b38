"""Persistence layer for BRD templates."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Template, TemplateField
from app.infrastructure.models import TemplateModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class TemplateRepository:
    """Provide CRUD operations for templates."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int | None = 100) -> Sequence[Template]:
        query = self.session.query(TemplateModel).order_by(
            TemplateModel.created_at.desc(), TemplateModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, template_id: int) -> Template | None:
        model = self.session.get(TemplateModel, template_id)
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Template | None:
        model = (
            self.session.query(TemplateModel)
            .filter(func.lower(TemplateModel.name) == name.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, template: Template) -> Template:
        model = TemplateModel(
            created_by=template.created_by,
            created_by_name=template.created_by_name,
        )
        if template.created_at is not None:
            model.created_at = ensure_app_naive_datetime(template.created_at)
        self._apply_entity_to_model(model, template)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, template: Template) -> Template:
        model = self.session.get(TemplateModel, template.id)
        if model is None:
            msg = f"Template with id {template.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, template)
        model.updated_at = ensure_app_naive_datetime(template.updated_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, template_id: int) -> None:
        model = self.session.get(TemplateModel, template_id)
        if model is None:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: TemplateModel, template: Template) -> None:
        model.name = template.name
        model.description = template.description
        model.fields = [_serialize_field(item) for item in template.fields]

    @staticmethod
    def _to_entity(model: TemplateModel) -> Template:
        return Template(
            id=model.id,
            name=model.name,
            description=model.description,
            fields=[_deserialize_field(entry) for entry in model.fields or []],
            created_by=model.created_by,
            created_by_name=model.created_by_name,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


def _serialize_field(template_field: TemplateField) -> dict[str, Any]:
    return {
        "name": template_field.name,
        "label": template_field.label,
        "required": template_field.required,
        "type": template_field.type,
        "options": list(template_field.options),
    }


def _deserialize_field(entry: dict[str, Any]) -> TemplateField:
    return TemplateField(
        name=str(entry.get("name") or ""),
        label=str(entry.get("label") or ""),
        required=bool(entry.get("required", True)),
        type=str(entry.get("type") or "text"),
        options=[str(option) for option in entry.get("options") or []],
    )


__all__ = ["TemplateRepository"]
