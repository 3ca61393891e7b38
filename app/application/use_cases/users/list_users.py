"""Use cases for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_ANALYST, User
from app.infrastructure.repositories import UserRepository


def list_users(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[User]:
    """Return a page of users ordered by id."""

    return UserRepository(session).list(skip=skip, limit=limit)


def list_analysts(session: Session) -> Sequence[User]:
    """Return the active business analysts available for assignment."""

    return UserRepository(session).list_by_role_alias(ROLE_ANALYST)
