"""Use cases for administering user accounts."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.utils import now_in_app_naive_datetime


def update_user_role(
    session: Session, *, user_id: int, role_alias: str, acting_user: User
) -> User:
    """Assign ``role_alias`` to the user identified by ``user_id``."""

    if not acting_user.is_admin():
        raise PermissionError("Only administrators can change roles")

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("User not found")

    role = RoleRepository(session).get_by_alias(role_alias)
    if role is None:
        raise ValueError("Role not found")

    if user.id == acting_user.id and role.alias != acting_user.role.alias:
        raise ValueError("Administrators cannot change their own role")

    user.role = role
    user.updated_at = now_in_app_naive_datetime()
    return repository.update(user)


def set_user_active(
    session: Session, *, user_id: int, is_active: bool, acting_user: User
) -> User:
    """Activate or suspend the user identified by ``user_id``."""

    if not acting_user.is_admin():
        raise PermissionError("Only administrators can change account status")
    if user_id == acting_user.id and not is_active:
        raise ValueError("Administrators cannot suspend themselves")

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("User not found")

    user.is_active = is_active
    user.updated_at = now_in_app_naive_datetime()
    return repository.update(user)
