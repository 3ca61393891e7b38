"""Use case for updating templates."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Template, TemplateField, User
from app.infrastructure.repositories import TemplateRepository
from app.utils import now_in_app_timezone

from .validators import build_fields, ensure_admin


def update_template(
    session: Session,
    *,
    user: User,
    template_id: int,
    name: str | None = None,
    description: str | None = None,
    fields: Iterable[TemplateField | Mapping[str, Any]] | None = None,
) -> Template:
    """Update the given attributes of a template.

    Requests that already copied the template keep their own copy of its
    sections, so editing never rewrites existing requests.
    """

    ensure_admin(user, "update")
    repository = TemplateRepository(session)
    current = repository.get(template_id)
    if current is None:
        raise ValueError("Template not found")

    new_name = current.name
    if name is not None:
        new_name = name.strip()
        if not new_name:
            raise ValueError("Template name cannot be empty")
        existing = repository.get_by_name(new_name)
        if existing is not None and existing.id != template_id:
            raise ValueError("Template name is already in use")

    updated = replace(
        current,
        name=new_name,
        description=description if description is not None else current.description,
        fields=build_fields(fields) if fields is not None else current.fields,
        updated_at=now_in_app_timezone(),
    )
    return repository.update(updated)
