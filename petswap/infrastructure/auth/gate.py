# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import Request, g, request

from petswap.domain.users.repositories import TokenService
from petswap.shared.errors import UnauthenticatedError
from petswap.shared.logging import bind_user_id, logger

AUTH_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "

F = TypeVar("F", bound=Callable[..., Any])


class AuthedRequest(Request):
    user_id: int


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def extract_bearer_token(header_value: str | None) -> str:
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        return ""
    return header_value[len(BEARER_PREFIX):].strip()


class AuthGate:
    """Checkpoint every protected view passes through.

    One verification per request, nothing cached between requests. Every
    failure surfaces as the same ``UnauthenticatedError``.
    """

    def __init__(self, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, header_value: str | None) -> int:
        token = extract_bearer_token(header_value)
        if not token:
            raise UnauthenticatedError()
        user_id = self._tokens.verify(token)
        if user_id is None:
            raise UnauthenticatedError()
        return user_id

    def protect(self, view: F) -> F:
        @wraps(view)
        def inner(*args, **kwargs):
            try:
                user_id = self.authenticate(request.headers.get(AUTH_HEADER))
            except UnauthenticatedError:
                logger.warning(
                    f"Auth failed on {request.method} {request.path} "
                    f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
                )
                raise

            request.user_id = user_id  # type: ignore[attr-defined]
            g.user_id = user_id
            bind_user_id(user_id)
            logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
            return view(*args, **kwargs)

        return cast(F, inner)


__all__ = ["AuthGate", "AuthedRequest", "authed_request", "extract_bearer_token"]
