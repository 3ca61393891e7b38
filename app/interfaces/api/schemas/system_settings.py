"""Schemas for the application-wide settings."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SystemSettingsRead(BaseModel):
    maintenance_mode: bool
    maintenance_message: str
    updated_at: datetime | None
    updated_by: int | None

    model_config = ConfigDict(from_attributes=True)


class SystemSettingsUpdate(BaseModel):
    maintenance_mode: bool | None = None
    maintenance_message: str | None = Field(default=None, max_length=1000)

    model_config = ConfigDict(extra="forbid")


class MaintenanceStatusRead(BaseModel):
    maintenance_mode: bool
    maintenance_message: str
