"""Persistence layer for application-wide settings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import GENERAL_SETTINGS_KEY, SystemSettings
from app.infrastructure.models import SystemSettingsModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class SystemSettingsRepository:
    """Read and store the settings row identified by ``key``."""

    def __init__(self, session: Session, key: str = GENERAL_SETTINGS_KEY) -> None:
        self.session = session
        self.key = key

    def get(self) -> SystemSettings | None:
        model = self.session.get(SystemSettingsModel, self.key)
        return self._to_entity(model) if model else None

    def save(self, settings: SystemSettings) -> SystemSettings:
        model = self.session.get(SystemSettingsModel, self.key)
        if model is None:
            model = SystemSettingsModel(key=self.key)
        model.maintenance_mode = settings.maintenance_mode
        model.maintenance_message = settings.maintenance_message
        model.updated_at = ensure_app_naive_datetime(settings.updated_at)
        model.updated_by = settings.updated_by
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: SystemSettingsModel) -> SystemSettings:
        return SystemSettings(
            maintenance_mode=bool(model.maintenance_mode),
            maintenance_message=model.maintenance_message,
            updated_at=ensure_app_timezone(model.updated_at),
            updated_by=model.updated_by,
        )


__all__ = ["SystemSettingsRepository"]
