from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from petswap.application.services.tokens import JwtTokenService, TokenSettings
from petswap.application.use_cases.users.login_user import LoginUserUseCase
from petswap.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from petswap.domain.users.entities import User
from petswap.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from petswap.infrastructure.auth import AuthGate
from petswap.interfaces.http.controllers.auth_controller import AuthController
from petswap.shared.middleware.error_handler import configure_error_handling


def _user(**overrides) -> User:
    fields = {
        "id": 1,
        "email": "a@x.com",
        "password_hash": "scrypt:32768:8:1$salt$digest",
        "first_name": "Ann",
        "last_name": "Lee",
        "phone": "+15550100",
        "created_at": datetime.now(UTC),
    }
    fields.update(overrides)
    return User(**fields)


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


@pytest.fixture()
def gate() -> AuthGate:
    return AuthGate(JwtTokenService(TokenSettings(secret="controller-test-secret-12345")))


def _controller(gate: AuthGate, **use_cases) -> AuthController:
    return AuthController(
        register_use_case=use_cases.get("register", MagicMock()),
        login_use_case=use_cases.get("login", MagicMock()),
        current_user_use_case=use_cases.get("current", MagicMock()),
        gate=gate,
    )


def test_register_returns_token_and_public_user(flask_app: Flask, gate: AuthGate) -> None:
    received: list[RegisterUserInput] = []

    class StubRegister:
        def execute(self, data: RegisterUserInput) -> tuple[User, str]:
            received.append(data)
            return _user(email=data.email), "token123"

    controller = _controller(gate, register=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register",
            json={
                "email": "a@x.com",
                "password": "longenough1",
                "firstName": "Ann",
                "lastName": "Lee",
                "phone": "",
            },
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "token": "token123",
        "user": {"id": 1, "email": "a@x.com", "firstName": "Ann", "lastName": "Lee"},
    }
    assert received == [
        RegisterUserInput(
            email="a@x.com", password="longenough1", first_name="Ann", last_name="Lee", phone=None
        )
    ]


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"email": "a@x.com"},
        {"password": "longenough1"},
        {"email": "not-an-email", "password": "longenough1"},
        {"email": "a@x.com", "password": "short"},
    ],
)
def test_register_invalid_payload_returns_422(
    flask_app: Flask, gate: AuthGate, body: dict
) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(gate, register=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/register", json=body)

    assert response.status_code == 422
    assert response.get_json()["error"] == "validation_error"
    register.execute.assert_not_called()


def test_register_conflict_returns_409(flask_app: Flask, gate: AuthGate) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    flask_app.register_blueprint(_controller(gate, register=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/register", json={"email": "a@x.com", "password": "longenough1"}
        )

    assert response.status_code == 409
    assert response.get_json() == {"error": "email_already_exists"}


def test_login_invalid_credentials_returns_401(flask_app: Flask, gate: AuthGate) -> None:
    login = MagicMock(spec=LoginUserUseCase)
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(gate, login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "wrong"}
        )

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


def test_login_missing_password_returns_422(flask_app: Flask, gate: AuthGate) -> None:
    flask_app.register_blueprint(_controller(gate).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": "a@x.com"})

    assert response.status_code == 422
    assert "password" in response.get_json()["context"]["fields"]


def test_unexpected_failure_is_generic(flask_app: Flask, gate: AuthGate) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("database is on fire at 10.0.0.5")
    flask_app.register_blueprint(_controller(gate, login=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "a@x.com", "password": "whatever"}
        )

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error"}


def test_me_requires_token(flask_app: Flask, gate: AuthGate) -> None:
    current = MagicMock()
    flask_app.register_blueprint(_controller(gate, current=current).as_blueprint())

    with flask_app.test_client() as client:
        response = client.get("/api/auth/me")

    assert response.status_code == 401
    current.execute.assert_not_called()


def test_me_returns_identity_projection(flask_app: Flask) -> None:
    tokens = JwtTokenService(TokenSettings(secret="controller-test-secret-12345"))
    current = MagicMock()
    current.execute.return_value = _user(id=3)
    controller = _controller(AuthGate(tokens), current=current)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {tokens.issue(3).token}"}
        )

    assert response.status_code == 200
    assert response.get_json() == {
        "id": 3,
        "email": "a@x.com",
        "firstName": "Ann",
        "lastName": "Lee",
        "phone": "+15550100",
    }
    current.execute.assert_called_once_with(3)
