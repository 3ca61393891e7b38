"""Validation helpers shared by template use cases."""

from collections.abc import Iterable, Mapping
from typing import Any

from app.domain.entities import FIELD_TYPES, TemplateField, User


def build_fields(raw_fields: Iterable[TemplateField | Mapping[str, Any]]) -> list[TemplateField]:
    """Normalize and validate template fields, preserving their order."""

    fields: list[TemplateField] = []
    seen: set[str] = set()
    for raw in raw_fields:
        if isinstance(raw, TemplateField):
            candidate = raw
        else:
            candidate = TemplateField(
                name=str(raw.get("name") or ""),
                label=str(raw.get("label") or ""),
                required=bool(raw.get("required", True)),
                type=str(raw.get("type") or "text"),
                options=[str(option) for option in raw.get("options") or []],
            )

        name = candidate.name.strip()
        label = candidate.label.strip() or name
        if not name:
            raise ValueError("Template field name cannot be empty")
        if name in seen:
            raise ValueError(f"Duplicate template field '{name}'")
        if candidate.type not in FIELD_TYPES:
            raise ValueError(f"Unsupported field type '{candidate.type}'")
        options = [option.strip() for option in candidate.options if option.strip()]
        if candidate.type == "select" and not options:
            raise ValueError(f"Field '{name}' requires at least one option")

        seen.add(name)
        fields.append(
            TemplateField(
                name=name,
                label=label,
                required=candidate.required,
                type=candidate.type,
                options=options,
            )
        )

    if not fields:
        raise ValueError("A template needs at least one field")
    return fields


def ensure_admin(user: User, action: str) -> None:
    if not user.is_admin():
        raise PermissionError(f"Only administrators can {action} templates")
