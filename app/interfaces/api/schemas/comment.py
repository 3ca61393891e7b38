"""Schemas for BRD request comments and activity logs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    recipient_id: int | None = Field(default=None, ge=1)


class CommentRead(BaseModel):
    id: int
    request_id: int
    user_id: int
    user_name: str
    user_role: str | None
    text: str
    recipient_id: int | None
    read: bool
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityRead(BaseModel):
    id: int
    request_id: int
    type: str
    description: str
    user_id: int
    user_name: str
    user_role: str | None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)
