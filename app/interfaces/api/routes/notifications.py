"""Endpoints and websocket handler for live BRD notifications."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationCenter,
    collect_notifications,
)
from app.application.use_cases.system_settings import maintenance_block_message
from app.config import get_settings
from app.domain.entities import Notification, User
from app.infrastructure import database
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, resolve_current_user
from app.interfaces.api.schemas import NotificationRead, NotificationSnapshot

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

POLICY_VIOLATION = 1008
TRY_AGAIN_LATER = 1013


def _serialize(notifications: Sequence[Notification]) -> list[dict[str, Any]]:
    return [
        NotificationRead.model_validate(item).model_dump(mode="json")
        for item in notifications
    ]


@router.get("/", response_model=NotificationSnapshot)
def read_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationSnapshot:
    """Return the reconciled notifications of the authenticated user."""

    settings = get_settings()
    notifications, unread_count = collect_notifications(
        db,
        user_id=current_user.id,
        limit=settings.notification_limit,
        window_days=settings.notification_window_days,
    )
    return NotificationSnapshot(
        data=[NotificationRead.model_validate(item) for item in notifications],
        unread_count=unread_count,
    )


def _authenticate(token: str) -> tuple[User | None, int]:
    """Return the user behind ``token`` or the close code refusing the socket."""

    session = database.SessionLocal()
    try:
        user = resolve_current_user(token, session)
        if not user.is_active:
            return None, POLICY_VIOLATION
        if maintenance_block_message(session, user) is not None:
            return None, TRY_AGAIN_LATER
    except HTTPException:
        return None, POLICY_VIOLATION
    finally:
        session.close()
    return user, 0


@router.websocket("/ws")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Stream the notification aggregate of the authenticated user.

    Client messages: ``{"type": "read", "id": ...}``, ``{"type": "read_all"}``
    and ``{"type": "ping"}``.
    """

    token = websocket.query_params.get("token")
    user, close_code = _authenticate(token) if token else (None, POLICY_VIOLATION)
    if user is None:
        await websocket.close(code=close_code)
        return

    await websocket.accept()
    ready = False

    async def push(notifications: Sequence[Notification], unread_count: int) -> None:
        if not ready:
            return
        await websocket.send_json(
            {
                "type": "notifications",
                "data": _serialize(notifications),
                "unread_count": unread_count,
            }
        )

    async def navigate(request_id: int) -> None:
        await websocket.send_json({"type": "navigate", "request_id": request_id})

    center = NotificationCenter(listener=push, navigator=navigate)
    try:
        await center.start(user.id)
        await center.flush()
        ready = True
        await push(center.notifications, center.unread_count)

        while True:
            raw = await websocket.receive_text()
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                logger.debug("Ignoring malformed websocket message")
                continue
            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
            elif message_type == "read":
                notification_id = message.get("id")
                if isinstance(notification_id, str):
                    await center.mark_read(notification_id)
            elif message_type == "read_all":
                await center.mark_all_read()
            else:
                logger.debug("Ignoring websocket message of type %r", message_type)
    except WebSocketDisconnect:
        logger.debug("Notification socket closed for user %s", user.id)
    finally:
        await center.stop()
