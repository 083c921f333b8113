from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask

from petswap.app import create_app
from petswap.infrastructure.container import container
from petswap.infrastructure.db import SessionLocal
from petswap.infrastructure.db.models import User


@pytest.fixture()
def app(reset_database: None) -> Flask:
    return create_app()


def _register(client, email: str = "a@x.com", password: str = "longenough1"):
    return client.post("/api/auth/register", json={"email": email, "password": password})


def test_register_then_lookup_identity(app: Flask) -> None:
    with app.test_client() as client:
        register = _register(client)
        assert register.status_code == 200
        body = register.get_json()
        assert set(body) == {"token", "user"}
        assert set(body["user"]) == {"id", "email", "firstName", "lastName"}
        assert body["user"]["email"] == "a@x.com"
        assert "password" not in register.get_data(as_text=True)
        assert "passwordHash" not in register.get_data(as_text=True)

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.get_json()["id"] == body["user"]["id"]
        assert me.get_json()["email"] == "a@x.com"

        anonymous = client.get("/api/auth/me")
        assert anonymous.status_code == 401


def test_expired_token_is_rejected(app: Flask) -> None:
    with app.test_client() as client:
        user_id = _register(client).get_json()["user"]["id"]
        expired = container.token_service.issue(
            user_id, now=datetime.now(UTC) - timedelta(days=7, seconds=1)
        ).token

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthenticated"}


def test_login_flow_and_uniform_failures(app: Flask) -> None:
    with app.test_client() as client:
        _register(client)

        login = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "longenough1"}
        )
        assert login.status_code == 200
        assert login.get_json()["user"]["email"] == "a@x.com"

        wrong_password = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "not-the-one"}
        )
        unknown_email = client.post(
            "/api/auth/login", json={"email": "nobody@x.com", "password": "longenough1"}
        )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json() == {"error": "invalid_credentials"}


def test_duplicate_registration_conflicts_and_keeps_digest(app: Flask) -> None:
    with app.test_client() as client:
        assert _register(client).status_code == 200
        session = SessionLocal()
        try:
            original_digest = session.query(User).one().password_hash
        finally:
            session.close()

        second = _register(client, password="another-password")

    assert second.status_code == 409
    assert second.get_json() == {"error": "email_already_exists"}

    session = SessionLocal()
    try:
        rows = session.query(User).all()
        assert len(rows) == 1
        assert rows[0].password_hash == original_digest
        assert "longenough1" not in rows[0].password_hash
    finally:
        session.close()


def test_token_for_deleted_identity_is_rejected(app: Flask) -> None:
    with app.test_client() as client:
        token = _register(client).get_json()["token"]
        session = SessionLocal()
        try:
            session.query(User).delete()
            session.commit()
        finally:
            session.close()

        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_health_reports_database(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert payload["database"] == "ok"
    assert "timestamp" in payload
