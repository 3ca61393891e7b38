"""Schemas for aggregated notifications."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class NotificationRead(BaseModel):
    id: str
    request_id: int
    request_name: str
    type: Literal["comment", "status"]
    message: str
    timestamp: datetime
    read: bool
    user_id: int | None = None
    user_name: str | None = None
    comment_id: int | None = None
    status: str | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationSnapshot(BaseModel):
    data: list[NotificationRead]
    unread_count: int
