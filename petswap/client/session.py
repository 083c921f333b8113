# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Client-side session: the persisted token and the identity it resolves to.

Token and identity always change together through a single ``Session``
value, so callers never see one without the other.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Protocol

from petswap.client.api import ApiError, PetswapApiClient
from petswap.shared.logging import logger


class TokenStore(Protocol):
    def get(self) -> str | None: ...
    def set(self, token: str) -> None: ...
    def clear(self) -> None: ...


@dataclass(slots=True, frozen=True)
class Session:
    token: str | None = None
    user: dict[str, Any] | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None


ANONYMOUS = Session()


class SessionManager:
    def __init__(self, api: PetswapApiClient, store: TokenStore) -> None:
        self._api = api
        self._store = store
        self._lock = threading.Lock()
        self._session = ANONYMOUS
        self._inflight: threading.Event | None = None

    @property
    def current(self) -> Session:
        with self._lock:
            return self._session

    def bootstrap(self) -> Session:
        """Resume a stored session, if any.

        Concurrent callers share one identity lookup. Any failure clears the
        stored token and leaves the session anonymous; nothing is raised and
        nothing is retried.
        """
        mine = threading.Event()
        with self._lock:
            running = self._inflight
            if running is None:
                self._inflight = mine

        if running is not None:
            running.wait()
            return self.current

        try:
            self._resolve_stored_token()
        finally:
            with self._lock:
                self._inflight = None
            mine.set()
        return self.current

    def _resolve_stored_token(self) -> None:
        token = self._store.get()
        if not token:
            return
        try:
            user = self._api.me(token)
        except ApiError as exc:
            logger.debug(f"session.bootstrap: stored token rejected status={exc.status}")
            with self._lock:
                # A login that finished meanwhile owns the store now.
                if self._store.get() == token:
                    self._store.clear()
                    self._session = ANONYMOUS
            return

        with self._lock:
            if self._store.get() == token:
                self._session = Session(token=token, user=user)
        logger.debug("session.bootstrap: resumed")

    def _activate(self, token: str, user: dict[str, Any]) -> Session:
        with self._lock:
            self._store.set(token)
            self._session = Session(token=token, user=user)
            return self._session

    def login(self, email: str, password: str) -> Session:
        result = self._api.login(email, password)
        return self._activate(result.token, result.user)

    def register(
        self,
        email: str,
        password: str,
        *,
        first_name: str = "",
        last_name: str = "",
        phone: str | None = None,
    ) -> Session:
        result = self._api.register(
            email, password, first_name=first_name, last_name=last_name, phone=phone
        )
        return self._activate(result.token, result.user)

    def logout(self) -> None:
        with self._lock:
            self._store.clear()
            self._session = ANONYMOUS


__all__ = ["ANONYMOUS", "Session", "SessionManager", "TokenStore"]
