"""Integration tests for the BRD request, comment and template endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from app.interfaces.api.dependencies import get_generation_service


class FakeGenerator:
    def generate_text(self, prompt: str, *, system_prompt: str | None = None) -> str:
        return "I. Project Information\n**Kiosk** rollout\nII. Scope\nAll branches"


TEMPLATE_PAYLOAD = {
    "name": "Standard BRD",
    "description": "Bank template",
    "fields": [
        {"name": "projectName", "label": "Nama Proyek"},
        {"name": "scope", "label": "Ruang Lingkup", "type": "textarea"},
        {"name": "noBRD", "label": "No. BRD", "required": False},
    ],
}


@pytest.fixture
def headers(auth_headers, requester, analyst, admin):
    return {
        "requester": auth_headers(requester),
        "analyst": auth_headers(analyst),
        "admin": auth_headers(admin),
    }


def test_template_endpoints(client, headers) -> None:
    forbidden = client.post("/templates/", json=TEMPLATE_PAYLOAD, headers=headers["requester"])
    assert forbidden.status_code == 403

    created = client.post("/templates/", json=TEMPLATE_PAYLOAD, headers=headers["admin"])
    assert created.status_code == 201
    body = created.json()
    assert [section["title"] for section in body["sections"]] == [
        "Project Information",
        "Scope",
        "Additional Information",
    ]

    listing = client.get("/templates/", headers=headers["requester"])
    assert [item["id"] for item in listing.json()] == [body["id"]]

    catalog = client.get("/templates/predefined-fields", headers=headers["admin"])
    assert catalog.status_code == 200
    assert any(item["name"] == "latarBelakang" for item in catalog.json())

    renamed = client.put(
        f"/templates/{body['id']}", json={"name": "Renamed"}, headers=headers["admin"]
    )
    assert renamed.json()["name"] == "Renamed"

    deleted = client.delete(f"/templates/{body['id']}", headers=headers["admin"])
    assert deleted.status_code == 204
    missing = client.get(f"/templates/{body['id']}", headers=headers["admin"])
    assert missing.status_code == 404


def test_full_request_workflow(client, headers, analyst) -> None:
    template_id = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=headers["admin"]
    ).json()["id"]

    created = client.post(
        "/brd-requests/",
        json={"project_name": "Branch kiosk", "priority": "High"},
        headers=headers["requester"],
    )
    assert created.status_code == 201
    request_id = created.json()["id"]
    assert created.json()["status"] == "New"

    assigned = client.put(
        f"/brd-requests/{request_id}/assignment",
        json={"analyst_id": analyst.id},
        headers=headers["admin"],
    )
    assert assigned.status_code == 200
    assert assigned.json()["status"] == "Pending Review"
    assert assigned.json()["assignment_history"][0]["analyst_id"] == analyst.id

    selected = client.put(
        f"/brd-requests/{request_id}/template",
        json={"template_id": template_id},
        headers=headers["requester"],
    )
    assert selected.status_code == 200
    assert selected.json()["template_name"] == "Standard BRD"

    not_my_turn = client.put(
        f"/brd-requests/{request_id}/form-data",
        json={"values": {"projectName": "Kiosk"}},
        headers=headers["analyst"],
    )
    assert not_my_turn.status_code == 403

    saved = client.put(
        f"/brd-requests/{request_id}/form-data",
        json={"values": {"projectName": "Kiosk", "scope": "All branches"}},
        headers=headers["requester"],
    )
    assert saved.json()["current_editor"] == "analyst"

    unavailable = client.post(
        f"/brd-requests/{request_id}/generate", headers=headers["analyst"]
    )
    assert unavailable.status_code == 503

    client.app.dependency_overrides[get_generation_service] = FakeGenerator
    try:
        generated = client.post(
            f"/brd-requests/{request_id}/generate", headers=headers["analyst"]
        )
    finally:
        client.app.dependency_overrides.clear()
    assert generated.status_code == 200
    assert generated.json()["status"] == "Already Generated"
    assert generated.json()["current_editor"] == "requester"

    sections = client.get(
        f"/brd-requests/{request_id}/sections", headers=headers["requester"]
    )
    assert sections.json()["sections"] == {
        "Project Information": "Kiosk rollout",
        "Scope": "All branches",
    }

    status_response = client.put(
        f"/brd-requests/{request_id}/status",
        json={"status": "Completed"},
        headers=headers["analyst"],
    )
    assert status_response.json()["status"] == "Completed"

    snapshot = client.get("/notifications/", headers=headers["requester"])
    assert snapshot.status_code == 200
    assert snapshot.json()["unread_count"] == 1
    [notification] = snapshot.json()["data"]
    assert notification["id"] == f"status_{request_id}"
    assert notification["message"] == "BRD has finished processing"


def test_request_visibility_and_errors(client, headers, make_user, auth_headers) -> None:
    request_id = client.post(
        "/brd-requests/", json={"project_name": "Payroll"}, headers=headers["requester"]
    ).json()["id"]
    outsider = auth_headers(make_user("requester"))

    assert client.get(f"/brd-requests/{request_id}", headers=outsider).status_code == 403
    assert client.get("/brd-requests/999", headers=headers["admin"]).status_code == 404
    assert client.get("/brd-requests/", headers=outsider).json() == []

    bad_status = client.put(
        f"/brd-requests/{request_id}/status",
        json={"status": "Archived"},
        headers=headers["admin"],
    )
    assert bad_status.status_code == 400


def test_comment_thread(client, headers, analyst, requester) -> None:
    request_id = client.post(
        "/brd-requests/", json={"project_name": "Payroll"}, headers=headers["requester"]
    ).json()["id"]
    client.put(
        f"/brd-requests/{request_id}/assignment",
        json={"analyst_id": analyst.id},
        headers=headers["admin"],
    )

    posted = client.post(
        f"/brd-requests/{request_id}/comments",
        json={"text": "Which branches are in scope?"},
        headers=headers["analyst"],
    )
    assert posted.status_code == 201
    comment = posted.json()
    assert comment["recipient_id"] == requester.id
    assert comment["read"] is False

    snapshot = client.get("/notifications/", headers=headers["requester"]).json()
    assert snapshot["data"][0]["id"] == f"comment_{comment['id']}"
    assert snapshot["unread_count"] == 2

    marked = client.post(
        f"/brd-requests/{request_id}/comments/{comment['id']}/read",
        headers=headers["requester"],
    )
    assert marked.status_code == 204

    thread = client.get(
        f"/brd-requests/{request_id}/comments", headers=headers["requester"]
    ).json()
    assert thread[0]["read"] is True

    missing = client.post(
        f"/brd-requests/{request_id}/comments/999/read", headers=headers["requester"]
    )
    assert missing.status_code == 404


def test_comment_deletion_and_activity_log(client, headers, analyst) -> None:
    request_id = client.post(
        "/brd-requests/", json={"project_name": "Payroll"}, headers=headers["requester"]
    ).json()["id"]
    client.put(
        f"/brd-requests/{request_id}/assignment",
        json={"analyst_id": analyst.id},
        headers=headers["admin"],
    )
    comment_id = client.post(
        f"/brd-requests/{request_id}/comments",
        json={"text": "Draft attached"},
        headers=headers["analyst"],
    ).json()["id"]

    not_author = client.delete(
        f"/brd-requests/{request_id}/comments/{comment_id}", headers=headers["requester"]
    )
    assert not_author.status_code == 403

    deleted = client.delete(
        f"/brd-requests/{request_id}/comments/{comment_id}", headers=headers["analyst"]
    )
    assert deleted.status_code == 204
    thread = client.get(f"/brd-requests/{request_id}/comments", headers=headers["analyst"])
    assert thread.json() == []

    missing = client.delete(
        f"/brd-requests/{request_id}/comments/{comment_id}", headers=headers["analyst"]
    )
    assert missing.status_code == 404

    client.put(
        f"/brd-requests/{request_id}/status",
        json={"status": "In Progress"},
        headers=headers["analyst"],
    )
    activities = client.get(
        f"/brd-requests/{request_id}/activities", headers=headers["requester"]
    )
    assert activities.status_code == 200
    [activity] = activities.json()
    assert activity["type"] == "status_change"
    assert activity["description"] == "Status changed from Pending Review to In Progress"
