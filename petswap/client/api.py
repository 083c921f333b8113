# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""HTTP client for the PetSwap API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from petswap.shared.logging import logger

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."

# Error codes the server sends on purpose, and the sentence shown for each.
EXPECTED_ERRORS: dict[str, str] = {
    "unauthenticated": "Please log in again.",
    "email_already_exists": "Email already exists",
    "invalid_credentials": "Invalid credentials",
    "validation_error": "Please check the highlighted fields.",
}


class ApiError(Exception):
    """Failure shown to the user. ``code`` is the server error code, when there was one."""

    def __init__(
        self, message: str, *, status: int | None = None, code: str | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code

    @property
    def is_network_error(self) -> bool:
        return self.status is None


@dataclass(slots=True, frozen=True)
class AuthResult:
    token: str
    user: dict[str, Any]


def _error_from_response(response: httpx.Response) -> ApiError:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    code = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(code, str) and code in EXPECTED_ERRORS:
        return ApiError(EXPECTED_ERRORS[code], status=response.status_code, code=code)
    return ApiError(GENERIC_ERROR_MESSAGE, status=response.status_code)


class PetswapApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> PetswapApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        token: str | None = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Header values must be ASCII; a corrupt stored token fails here.
            logger.warning(f"api: {method} {path} failed ({type(exc).__name__})")
            raise ApiError(GENERIC_ERROR_MESSAGE) from exc

        if response.is_error:
            raise _error_from_response(response)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(GENERIC_ERROR_MESSAGE, status=response.status_code) from exc

    def _auth(self, path: str, body: dict[str, Any]) -> AuthResult:
        data = self._request("POST", path, json=body)
        if not isinstance(data, dict) or not data.get("token") or not isinstance(data.get("user"), dict):
            raise ApiError(GENERIC_ERROR_MESSAGE, status=200)
        return AuthResult(token=data["token"], user=data["user"])

    def register(
        self,
        email: str,
        password: str,
        *,
        first_name: str = "",
        last_name: str = "",
        phone: str | None = None,
    ) -> AuthResult:
        body: dict[str, Any] = {
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
        }
        if phone:
            body["phone"] = phone
        return self._auth("/api/auth/register", body)

    def login(self, email: str, password: str) -> AuthResult:
        return self._auth("/api/auth/login", {"email": email, "password": password})

    def me(self, token: str) -> dict[str, Any]:
        data = self._request("GET", "/api/auth/me", token=token)
        if not isinstance(data, dict):
            raise ApiError(GENERIC_ERROR_MESSAGE, status=200)
        return data

    def list_properties(self) -> list[dict[str, Any]]:
        return list(self._request("GET", "/api/properties"))

    def list_bookings(self, token: str) -> list[dict[str, Any]]:
        return list(self._request("GET", "/api/bookings", token=token))

    def create_property(self, token: str, listing: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/properties", json=listing, token=token)


__all__ = [
    "ApiError",
    "AuthResult",
    "EXPECTED_ERRORS",
    "GENERIC_ERROR_MESSAGE",
    "PetswapApiClient",
]
