# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens.

Tokens are HS256 JWTs carrying the identity id in ``sub`` plus ``iat`` and
``exp``. Nothing is stored server side, so a token stays valid until it
expires; there is no revocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from petswap.domain.users.entities import IssuedToken
from petswap.domain.users.repositories import TokenService
from petswap.shared.config import AppConfig
from petswap.shared.logging import logger

TOKEN_TTL = timedelta(days=7)
_REQUIRED_CLAIMS = ["exp", "iat", "sub"]


@dataclass(slots=True, frozen=True)
class TokenSettings:
    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = TOKEN_TTL

    def __post_init__(self) -> None:
        if not self.secret:
            raise ValueError("token signing secret must not be empty")

    @classmethod
    def from_config(cls, config: AppConfig) -> TokenSettings:
        if config.uses_fallback_secret():
            logger.warning(
                f"tokens: JWT_SECRET not set, using development fallback (APP_ENV={config.app_env})"
            )
        return cls(secret=config.signing_secret())


class JwtTokenService(TokenService):
    def __init__(self, settings: TokenSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> TokenSettings:
        return self._settings

    def issue(self, user_id: int, *, now: datetime | None = None) -> IssuedToken:
        issued_at = now or datetime.now(UTC)
        expires_at = issued_at + self._settings.ttl
        payload = {"sub": str(user_id), "iat": issued_at, "exp": expires_at}
        token = jwt.encode(payload, self._settings.secret, algorithm=self._settings.algorithm)
        logger.debug(f"tokens.issue: user={user_id} exp={expires_at.isoformat()}")
        return IssuedToken(user_id=user_id, token=token, expires_at=expires_at)

    def verify(self, token: str) -> int | None:
        """Return the identity id for a valid token, ``None`` for anything else.

        The reason a token was rejected is only logged; callers get no
        distinction between expired, forged and garbled tokens.
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._settings.secret,
                algorithms=[self._settings.algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            logger.info("tokens.verify: rejected reason=expired")
            return None
        except jwt.InvalidSignatureError:
            logger.warning("tokens.verify: rejected reason=bad_signature")
            return None
        except jwt.InvalidTokenError as exc:
            logger.info(f"tokens.verify: rejected reason=malformed ({type(exc).__name__})")
            return None

        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            logger.info("tokens.verify: rejected reason=bad_subject")
            return None


__all__ = ["JwtTokenService", "TOKEN_TTL", "TokenSettings"]
