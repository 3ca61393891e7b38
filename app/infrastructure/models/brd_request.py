"""SQLAlchemy model for BRD requests."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class BRDRequestModel(Base):
    """Database representation of a BRD request and its working form."""

    __tablename__ = "brd_requests"

    id = Column(Integer, primary_key=True, index=True)
    project_name = Column(String(200), nullable=False)
    created_by = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    created_by_name = Column(String(100), nullable=False)
    business_unit = Column(String(120), nullable=True)
    status = Column(String(30), nullable=False, index=True)
    priority = Column(String(20), nullable=True)
    request_type = Column(String(50), nullable=True)
    target_date = Column(String(30), nullable=True)
    background = Column(Text, nullable=True)
    current_condition = Column(Text, nullable=True)
    expected_condition = Column(Text, nullable=True)
    assigned_analyst_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    assigned_analyst_name = Column(String(100), nullable=True)
    assigned_at = Column(DateTime(), nullable=True)
    assignment_history = Column(JSON, nullable=False, default=list)
    template_id = Column(Integer, ForeignKey("brd_templates.id"), nullable=True)
    template_name = Column(String(120), nullable=True)
    template_sections = Column(JSON, nullable=False, default=list)
    form_data = Column(JSON, nullable=False, default=dict)
    generated_content = Column(Text, nullable=True)
    current_editor = Column(String(20), nullable=False, default="requester")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, index=True)
    updated_by = Column(Integer, nullable=True)

    comments = relationship(
        "CommentModel",
        back_populates="request",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["BRDRequestModel"]
