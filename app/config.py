"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./ebrd.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        default="change-me",
        description="Secret key for signing JWT tokens",
        min_length=1,
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="Asia/Jakarta",
        description="IANA timezone (or UTC+HH:MM offset) used for timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    openai_api_key: str | None = Field(
        default=None, description="API key used to call the completion endpoint"
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Optional base URL for OpenAI-compatible providers",
    )
    openai_model: str = Field(default="gpt-4.1-mini")
    openai_temperature: float = Field(default=0.7, ge=0, le=2)
    openai_max_output_tokens: int | None = Field(default=4000)

    notification_limit: int = Field(
        default=50,
        description="Maximum number of notifications kept in a session aggregate",
        gt=0,
    )
    notification_window_days: int = Field(
        default=7,
        description="Only comments and status changes newer than this are notified",
        gt=0,
    )
    max_projects_per_analyst: int = Field(
        default=5,
        description="Active assignments an analyst may hold before new ones are refused",
        gt=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
