"""Use case for creating templates."""

from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Template, TemplateField, User
from app.infrastructure.repositories import TemplateRepository
from app.utils import now_in_app_timezone

from .validators import build_fields, ensure_admin


def create_template(
    session: Session,
    *,
    user: User,
    name: str,
    fields: Iterable[TemplateField | Mapping[str, Any]],
    description: str | None = None,
) -> Template:
    """Create a new template owned by the acting administrator."""

    ensure_admin(user, "create")
    repository = TemplateRepository(session)

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Template name cannot be empty")

    if repository.get_by_name(normalized_name) is not None:
        raise ValueError("Template name is already in use")

    template = Template(
        id=None,
        name=normalized_name,
        description=description,
        fields=build_fields(fields),
        created_by=user.id,
        created_by_name=user.name,
        created_at=now_in_app_timezone(),
    )
    return repository.create(template)
