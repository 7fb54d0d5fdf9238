"""Tests for the authentication token endpoint."""

from __future__ import annotations

import pytest

from app.infrastructure.database import SessionLocal
from app.infrastructure.models import UserModel

PASSWORD = "StrongPass123"


def _set_active(user_id: int, is_active: bool) -> None:
    with SessionLocal() as session:
        model = session.get(UserModel, user_id)
        model.is_active = is_active
        session.commit()


@pytest.mark.parametrize("role_alias", ["admin", "member"])
def test_login_returns_bearer_token_with_role(client, make_user, role_alias: str) -> None:
    user = make_user(role_alias=role_alias)

    response = client.post(
        "/auth/token",
        data={"username": user.email, "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["role"] == role_alias
    assert bool(payload["access_token"])


def test_login_with_wrong_password_is_rejected(client, make_user) -> None:
    user = make_user()

    response = client.post(
        "/auth/token",
        data={"username": user.email, "password": "nope"},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Incorrect email or password"}


def test_inactive_user_cannot_log_in(client, make_user) -> None:
    user = make_user()
    _set_active(user.id, False)

    response = client.post(
        "/auth/token",
        data={"username": user.email, "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == 403
    assert response.json() == {"message": "Inactive user"}


def test_deactivation_invalidates_existing_token(client, make_user, token_for) -> None:
    """Tokens carry a signature of the account state and stop working once it changes."""

    user = make_user()
    token = token_for(user)
    headers = {"Authorization": f"Bearer {token}"}
    assert client.get("/notifications/unread-count", headers=headers).status_code == 200

    _set_active(user.id, False)

    response = client.get("/notifications/unread-count", headers=headers)
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}
