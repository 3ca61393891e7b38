"""Tests for the live notification websocket."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from starlette.websockets import WebSocketDisconnect

from app.infrastructure.repositories import CommentRepository


def _receive_until(websocket, message_type: str, attempts: int = 10) -> dict:
    for _ in range(attempts):
        message = websocket.receive_json()
        if message["type"] == message_type:
            return message
    raise AssertionError(f"No {message_type!r} message received")


@pytest.fixture
def request_id(client, requester, analyst, admin, auth_headers) -> int:
    created = client.post(
        "/brd-requests/",
        json={"project_name": "Branch kiosk"},
        headers=auth_headers(requester),
    )
    request_id = created.json()["id"]
    client.put(
        f"/brd-requests/{request_id}/assignment",
        json={"analyst_id": analyst.id},
        headers=auth_headers(admin),
    )
    return request_id


def test_websocket_rejects_invalid_token(client) -> None:
    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect("/notifications/ws?token=invalid"):
            pass
    assert excinfo.value.code == 1008


def test_websocket_rejects_missing_token(client) -> None:
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws"):
            pass


def test_websocket_sends_initial_snapshot_and_pong(
    client, requester, request_id, token_for
) -> None:
    token = token_for(requester)
    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        initial = websocket.receive_json()
        assert initial["type"] == "notifications"
        assert initial["unread_count"] == 1
        assert initial["data"][0]["id"] == f"status_{request_id}"

        websocket.send_text("not json")
        websocket.send_json({"type": "ping"})
        assert _receive_until(websocket, "pong") == {"type": "pong"}


def test_websocket_pushes_comments_and_marks_them_read(
    client, requester, analyst, request_id, auth_headers, token_for, session
) -> None:
    token = token_for(requester)
    analyst_headers = auth_headers(analyst)
    with client.websocket_connect(f"/notifications/ws?token={token}") as websocket:
        websocket.receive_json()

        posted = client.post(
            f"/brd-requests/{request_id}/comments",
            json={"text": "Please confirm the rollout date"},
            headers=analyst_headers,
        )
        comment_id = posted.json()["id"]
        notification_id = f"comment_{comment_id}"

        for _ in range(10):
            update = _receive_until(websocket, "notifications")
            if any(item["id"] == notification_id for item in update["data"]):
                break
        else:
            raise AssertionError("Comment notification was not pushed")
        assert update["unread_count"] == 2

        websocket.send_json({"type": "read", "id": notification_id})
        navigate = _receive_until(websocket, "navigate")
        assert navigate == {"type": "navigate", "request_id": request_id}

    stored = CommentRepository(session).get(comment_id)
    assert stored is not None
    assert stored.read is True
