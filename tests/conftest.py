"""Shared fixtures for the test suite."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "ebrd_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ.pop("OPENAI_API_KEY", None)

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import ROLE_ADMIN, ROLE_ANALYST, ROLE_REQUESTER, User  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)

FIXTURE_PASSWORD = "Secret123"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from an empty schema with seeded roles."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_user(session):
    """Return a factory creating users with the given role alias."""

    from app.application.use_cases.users import create_user

    counter = {"value": 0}

    def factory(role_alias: str = ROLE_REQUESTER, *, name: str | None = None) -> User:
        counter["value"] += 1
        index = counter["value"]
        return create_user(
            session,
            name=name or f"{role_alias.title()} {index}",
            email=f"{role_alias}{index}@example.com",
            password=FIXTURE_PASSWORD,
            role_alias=role_alias,
            business_unit="Digital Banking",
        )

    return factory


@pytest.fixture
def requester(make_user) -> User:
    return make_user(ROLE_REQUESTER, name="Rina Requester")


@pytest.fixture
def analyst(make_user) -> User:
    return make_user(ROLE_ANALYST, name="Andi Analyst")


@pytest.fixture
def admin(make_user) -> User:
    return make_user(ROLE_ADMIN, name="Ayu Admin")


@pytest.fixture
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


def login(client, user: User, password: str = FIXTURE_PASSWORD) -> str:
    response = client.post(
        "/auth/token",
        data={"username": user.email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


@pytest.fixture
def auth_headers(client):
    """Return a helper building bearer headers for a user."""

    def factory(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {login(client, user)}"}

    return factory


@pytest.fixture
def token_for(client):
    """Return a helper issuing an access token for a user."""

    def factory(user: User) -> str:
        return login(client, user)

    return factory
