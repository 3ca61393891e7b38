"""SQLAlchemy model for request comments."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class CommentModel(Base):
    """Database representation of a comment on a BRD request."""

    __tablename__ = "brd_comments"

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(
        Integer,
        ForeignKey("brd_requests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    user_name = Column(String(100), nullable=False)
    user_role = Column(String(50), nullable=True)
    text = Column(Text, nullable=False)
    recipient_id = Column(Integer, ForeignKey("user.id"), nullable=True, index=True)
    read = Column(Boolean, nullable=False, default=False)
    timestamp = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )

    request = relationship("BRDRequestModel", back_populates="comments")


__all__ = ["CommentModel"]
