"""SQLAlchemy model for BRD templates."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class TemplateModel(Base):
    """Database representation of a BRD template definition."""

    __tablename__ = "brd_templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    fields = Column(JSON, nullable=False, default=list)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=True)
    created_by_name = Column(String(100), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True)


__all__ = ["TemplateModel"]
