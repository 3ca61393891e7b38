"""SQLAlchemy model for application-wide settings."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base


class SystemSettingsModel(Base):
    """Database representation of a named group of settings."""

    __tablename__ = "system_settings"

    key = Column(String(50), primary_key=True)
    maintenance_mode = Column(Boolean, nullable=False, default=False)
    maintenance_message = Column(Text, nullable=False)
    updated_at = Column(DateTime(), nullable=True)
    updated_by = Column(Integer, ForeignKey("user.id"), nullable=True)


__all__ = ["SystemSettingsModel"]
