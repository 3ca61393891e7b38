"""Tests for the authentication token endpoint and user registration."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from app.application.use_cases.users import set_user_active


def test_login_returns_bearer_token_with_role(client, requester) -> None:
    response = client.post(
        "/auth/token",
        data={"username": requester.email, "password": "Secret123"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["role"] == "requester"
    assert bool(payload["access_token"])


def test_login_with_wrong_password_is_rejected(client, requester) -> None:
    response = client.post(
        "/auth/token",
        data={"username": requester.email, "password": "nope-nope"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 401


def test_suspended_user_cannot_login_and_loses_token(
    client, session, requester, admin, auth_headers
) -> None:
    headers = auth_headers(requester)

    set_user_active(session, user_id=requester.id, is_active=False, acting_user=admin)

    me_response = client.get("/users/me", headers=headers)
    assert me_response.status_code == 401

    login_response = client.post(
        "/auth/token",
        data={"username": requester.email, "password": "Secret123"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert login_response.status_code == 403


def test_validate_refreshes_the_token(client, requester, auth_headers) -> None:
    response = client.get("/auth/token/validate", headers=auth_headers(requester))

    assert response.status_code == 200
    assert response.headers["X-Refreshed-Token"]
    assert response.json()["role"] == "requester"


def test_self_registration_creates_requesters(client) -> None:
    payload = {
        "name": "Sari Wulandari",
        "email": "sari@example.com",
        "password": "Secret123",
        "business_unit": "Treasury",
        "position": "Officer",
    }

    response = client.post("/users/", json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["role"]["alias"] == "requester"
    assert created["business_unit"] == "Treasury"

    duplicate = client.post("/users/", json=payload)
    assert duplicate.status_code == 400

    token = client.post(
        "/auth/token",
        data={"username": payload["email"], "password": payload["password"]},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    ).json()["access_token"]
    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "sari@example.com"
    assert me.json()["last_login"] is not None


def test_admin_changes_roles(client, requester, admin, auth_headers) -> None:
    admin_headers = auth_headers(admin)

    forbidden = client.put(
        f"/users/{admin.id}/role",
        json={"role": "analyst"},
        headers=auth_headers(requester),
    )
    assert forbidden.status_code == 403

    response = client.put(
        f"/users/{requester.id}/role", json={"role": "analyst"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["role"]["alias"] == "analyst"

    analysts = client.get("/users/analysts", headers=admin_headers)
    assert [item["id"] for item in analysts.json()] == [requester.id]

    unknown_role = client.put(
        f"/users/{requester.id}/role", json={"role": "owner"}, headers=admin_headers
    )
    assert unknown_role.status_code == 400

    listing = client.get("/users/", headers=admin_headers)
    assert {item["id"] for item in listing.json()} == {requester.id, admin.id}
