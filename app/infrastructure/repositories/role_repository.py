"""Persistence layer for roles data."""

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.domain.entities import Role
from app.infrastructure.models import RoleModel


class RoleRepository:
    """Provide access to the workflow roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> Sequence[Role]:
        query = self.session.query(RoleModel).order_by(RoleModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, role_id: int) -> Role | None:
        model = self.session.query(RoleModel).filter_by(id=role_id).first()
        return self._to_entity(model) if model else None

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.alias) == alias.lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, *, name: str, alias: str) -> Role:
        model = RoleModel(name=name, alias=alias)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)


__all__ = ["RoleRepository"]
