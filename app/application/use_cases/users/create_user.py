"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import ROLE_REQUESTER, User
from app.infrastructure.repositories import RoleRepository, UserRepository
from app.infrastructure.security import get_password_hash
from app.utils import now_in_app_naive_datetime


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = ROLE_REQUESTER,
    business_unit: str | None = None,
    position: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses.

    Self-registration always goes through this use case with the default
    requester role; administrators promote users afterwards.
    """

    repository = UserRepository(session)

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Name cannot be empty")

    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    role = RoleRepository(session).get_by_alias(role_alias)
    if role is None:
        raise ValueError("Role not found")

    user = User(
        id=None,
        role=role,
        name=normalized_name,
        email=email,
        password=get_password_hash(password),
        business_unit=business_unit,
        position=position,
        last_login=None,
        created_at=now_in_app_naive_datetime(),
        updated_at=None,
        is_active=True,
    )
    return repository.create(user)
