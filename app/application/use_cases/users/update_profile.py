"""Use case for users editing their own profile."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash, verify_password
from app.utils import now_in_app_naive_datetime


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def update_profile(
    session: Session,
    *,
    user: User,
    name: str | None = None,
    phone: str | None = None,
    business_unit: str | None = None,
    position: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> User:
    """Update the profile fields of ``user``.

    Omitted fields keep their value. Changing the password requires the
    current one and revokes the tokens issued before the change.
    """

    repository = UserRepository(session)
    current = repository.get(user.id)
    if current is None:
        raise ValueError("User not found")

    new_name = current.name
    if name is not None:
        new_name = name.strip()
        if not new_name:
            raise ValueError("Name cannot be empty")

    updated = replace(
        current,
        name=new_name,
        phone=current.phone if phone is None else _optional_text(phone),
        business_unit=(
            current.business_unit if business_unit is None else _optional_text(business_unit)
        ),
        position=current.position if position is None else _optional_text(position),
        updated_at=now_in_app_naive_datetime(),
    )

    if new_password:
        if not current_password or not verify_password(current_password, current.password):
            raise PermissionError("Current password is incorrect")
        updated = replace(updated, password=get_password_hash(new_password))

    return repository.update(updated)
