"""Use cases for reading the application-wide settings."""

from sqlalchemy.orm import Session

from app.domain.entities import SystemSettings, User
from app.infrastructure.repositories import SystemSettingsRepository


def get_system_settings(session: Session) -> SystemSettings:
    """Return the stored settings, or the defaults when none were saved yet."""

    return SystemSettingsRepository(session).get() or SystemSettings()


def maintenance_block_message(session: Session, user: User) -> str | None:
    """Return the maintenance message when ``user`` is locked out, else ``None``.

    Administrators keep access while maintenance mode is on.
    """

    if user.is_admin():
        return None
    settings = get_system_settings(session)
    if not settings.maintenance_mode:
        return None
    return settings.maintenance_message
