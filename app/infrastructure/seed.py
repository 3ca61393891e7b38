"""Reference data required by the BRD workflow."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_NAMES
from app.infrastructure.repositories import RoleRepository

logger = logging.getLogger(__name__)


def seed_roles(session: Session) -> None:
    """Create the workflow roles that are missing from the database."""

    repository = RoleRepository(session)
    for alias, name in ROLE_NAMES.items():
        if repository.get_by_alias(alias) is None:
            repository.create(name=name, alias=alias)
            logger.info("Created role %s", alias)


__all__ = ["seed_roles"]
