from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask, g, jsonify

from petswap.application.services.tokens import JwtTokenService, TokenSettings
from petswap.infrastructure.auth import AuthGate, authed_request, extract_bearer_token
from petswap.shared.errors import UnauthenticatedError
from petswap.shared.middleware.error_handler import configure_error_handling

SECRET = "gate-test-secret-0123456789abcdef"


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(TokenSettings(secret=SECRET))


@pytest.fixture()
def handler_calls() -> list[int]:
    return []


@pytest.fixture()
def flask_app(tokens: JwtTokenService, handler_calls: list[int]) -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    gate = AuthGate(tokens)

    def whoami():
        handler_calls.append(authed_request().user_id)
        return jsonify({"userId": authed_request().user_id, "g": g.user_id})

    app.add_url_rule("/whoami", view_func=gate.protect(whoami))
    return app


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, ""),
        ("", ""),
        ("Bearer abc.def", "abc.def"),
        ("Bearer   spaced ", "spaced"),
        ("Basic dXNlcjpwYXNz", ""),
        ("bearer lowercase", ""),
        ("Bearer", ""),
    ],
)
def test_extract_bearer_token(header: str | None, expected: str) -> None:
    assert extract_bearer_token(header) == expected


def test_valid_token_attaches_identity(
    flask_app: Flask, tokens: JwtTokenService, handler_calls: list[int]
) -> None:
    token = tokens.issue(5).token

    with flask_app.test_client() as client:
        response = client.get("/whoami", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == {"userId": 5, "g": 5}
    assert handler_calls == [5]


def test_missing_header_never_reaches_handler(
    flask_app: Flask, handler_calls: list[int]
) -> None:
    with flask_app.test_client() as client:
        response = client.get("/whoami")

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthenticated"}
    assert handler_calls == []


def test_failures_share_one_response(flask_app: Flask, tokens: JwtTokenService) -> None:
    expired = tokens.issue(5, now=datetime.now(UTC) - timedelta(days=8)).token
    forged = JwtTokenService(TokenSettings(secret="someone-elses-secret-987654321")).issue(5).token
    headers = [
        {},
        {"Authorization": "Bearer garbage"},
        {"Authorization": f"Bearer {expired}"},
        {"Authorization": f"Bearer {forged}"},
        {"Authorization": f"Token {tokens.issue(5).token}"},
    ]

    with flask_app.test_client() as client:
        responses = [client.get("/whoami", headers=h) for h in headers]

    assert {r.status_code for r in responses} == {401}
    assert {r.get_data(as_text=True) for r in responses} == {responses[0].get_data(as_text=True)}


def test_identity_does_not_leak_between_requests(
    flask_app: Flask, tokens: JwtTokenService
) -> None:
    with flask_app.test_client() as client:
        first = client.get("/whoami", headers={"Authorization": f"Bearer {tokens.issue(1).token}"})
        second = client.get("/whoami")

    assert first.status_code == 200
    assert second.status_code == 401


def test_authenticate_raises_uniform_error(tokens: JwtTokenService) -> None:
    gate = AuthGate(tokens)

    assert gate.authenticate(f"Bearer {tokens.issue(9).token}") == 9
    with pytest.raises(UnauthenticatedError):
        gate.authenticate(None)
    with pytest.raises(UnauthenticatedError):
        gate.authenticate("Bearer nope")
