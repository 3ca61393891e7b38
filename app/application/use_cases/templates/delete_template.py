"""Use case for deleting templates."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import TemplateRepository

from .validators import ensure_admin


def delete_template(session: Session, *, user: User, template_id: int) -> None:
    """Delete the template identified by ``template_id``."""

    ensure_admin(user, "delete")
    repository = TemplateRepository(session)
    if repository.get(template_id) is None:
        raise ValueError("Template not found")
    repository.delete(template_id)
