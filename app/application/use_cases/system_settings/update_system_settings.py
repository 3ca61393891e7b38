"""Use case for changing the application-wide settings."""

import logging
from dataclasses import replace

from sqlalchemy.orm import Session

from app.domain.entities import SystemSettings, User
from app.infrastructure.repositories import SystemSettingsRepository
from app.utils import now_in_app_timezone

from .get_system_settings import get_system_settings

logger = logging.getLogger(__name__)


def update_system_settings(
    session: Session,
    *,
    user: User,
    maintenance_mode: bool | None = None,
    maintenance_message: str | None = None,
) -> SystemSettings:
    """Toggle maintenance mode or change its message. Administrators only."""

    if not user.is_admin():
        raise PermissionError("Only administrators can change the system settings")

    current = get_system_settings(session)
    message = current.maintenance_message
    if maintenance_message is not None:
        message = maintenance_message.strip()
        if not message:
            raise ValueError("The maintenance message cannot be empty")

    updated = replace(
        current,
        maintenance_mode=(
            current.maintenance_mode if maintenance_mode is None else maintenance_mode
        ),
        maintenance_message=message,
        updated_at=now_in_app_timezone(),
        updated_by=user.id,
    )
    saved = SystemSettingsRepository(session).save(updated)
    if saved.maintenance_mode != current.maintenance_mode:
        logger.warning(
            "Maintenance mode %s by user %s",
            "enabled" if saved.maintenance_mode else "disabled",
            user.id,
        )
    return saved
