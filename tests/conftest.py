"""Shared fixtures: a throwaway SQLite database, users, tokens and clients."""

from __future__ import annotations

import itertools
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "devvault_notifications_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["REALTIME_REQUIRE_TOKEN"] = "true"

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fastapi.testclient import TestClient  # noqa: E402

from app.application.use_cases.users import create_user  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)

DEFAULT_PASSWORD = "StrongPass123"

_emails = itertools.count(1)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def make_user():
    """Return a factory inserting users with a known password."""

    def _make(name: str = "Member", *, role_alias: str = "member", email: str | None = None):
        with SessionLocal() as db:
            return create_user(
                db,
                name=name,
                email=email or f"user{next(_emails)}@example.com",
                password=DEFAULT_PASSWORD,
                role_alias=role_alias,
            )

    return _make


@pytest.fixture()
def app():
    from main import create_app

    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(
        "/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


@pytest.fixture()
def auth_headers(client):
    """Return a helper building bearer headers for a user."""

    def _headers(user) -> dict[str, str]:
        return {"Authorization": f"Bearer {login(client, user.email)}"}

    return _headers


@pytest.fixture()
def token_for(client):
    """Return a helper producing an access token for a user."""

    def _token(user) -> str:
        return login(client, user.email)

    return _token
