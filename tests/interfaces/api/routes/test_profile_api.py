"""Tests for users editing their own profile."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")


def test_profile_fields_are_updated(client, requester, auth_headers) -> None:
    headers = auth_headers(requester)

    response = client.put(
        "/users/me",
        json={"name": "Rina Putri", "phone": "0812-555", "position": "Product Owner"},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Rina Putri"
    assert body["phone"] == "0812-555"
    assert body["position"] == "Product Owner"
    assert body["business_unit"] == "Digital Banking"
    assert body["role"]["alias"] == "requester"


def test_blank_name_is_rejected(client, requester, auth_headers) -> None:
    response = client.put("/users/me", json={"name": "  "}, headers=auth_headers(requester))

    assert response.status_code == 400


def test_unknown_fields_are_rejected(client, requester, auth_headers) -> None:
    response = client.put(
        "/users/me", json={"role": "admin"}, headers=auth_headers(requester)
    )

    assert response.status_code == 422


def test_password_change_requires_current_password(client, requester, auth_headers) -> None:
    response = client.put(
        "/users/me",
        json={"current_password": "wrong-one", "new_password": "NewSecret123"},
        headers=auth_headers(requester),
    )

    assert response.status_code == 403


def test_password_change_revokes_previous_tokens(client, requester, auth_headers) -> None:
    headers = auth_headers(requester)

    response = client.put(
        "/users/me",
        json={"current_password": "Secret123", "new_password": "NewSecret123"},
        headers=headers,
    )
    assert response.status_code == 200

    assert client.get("/users/me", headers=headers).status_code == 401
    login = client.post(
        "/auth/token",
        data={"username": requester.email, "password": "NewSecret123"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert login.status_code == 200
