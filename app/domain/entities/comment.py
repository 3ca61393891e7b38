"""Domain entity representing a comment on a BRD request."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    """Message exchanged between the participants of a request."""

    id: int | None
    request_id: int
    user_id: int
    user_name: str
    user_role: str | None
    text: str
    recipient_id: int | None
    read: bool = False
    timestamp: datetime | None = None


__all__ = ["Comment"]
