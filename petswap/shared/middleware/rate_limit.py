# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from threading import Lock
from typing import Any, TypeVar, cast

from flask import jsonify, request

from petswap.shared.config import load_config
from petswap.shared.logging import logger
from petswap.shared.middleware.request_logger import client_ip

F = TypeVar("F", bound=Callable[..., Any])


class InMemoryRateLimiter:
    """Sliding-window limiter keyed by arbitrary strings (per process)."""

    def __init__(self, limit: int, window_seconds: float) -> None:
        self.limit = max(1, int(limit))
        self.window = max(0.1, float(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._lock = Lock()

    def allow(self, key: str, *, now: float | None = None) -> bool:
        return self.retry_after(key, now=now) == 0.0

    def retry_after(self, key: str, *, now: float | None = None) -> float:
        """Record a hit and return 0, or return seconds until a slot frees up."""
        now = time.monotonic() if now is None else now
        with self._lock:
            hits = self._hits.setdefault(key, deque())
            while hits and now - hits[0] > self.window:
                hits.popleft()
            if len(hits) >= self.limit:
                return max(0.001, self.window - (now - hits[0]))
            hits.append(now)
            return 0.0


def rate_limit(limit: int | None = None, window_seconds: float | None = None) -> Callable[[F], F]:
    """Throttle a view per client IP; a no-op when rate limiting is switched off.

    Limits default to ``RL_LIMIT`` requests per ``RL_WINDOW`` seconds.
    """
    security = load_config().security
    limiter = InMemoryRateLimiter(
        limit or security.rate_limit_requests,
        window_seconds or security.rate_limit_window,
    )

    def decorator(view: F) -> F:
        if not security.enable_rate_limit:
            return view

        @wraps(view)
        def throttled(*args, **kwargs):
            ip = client_ip()
            wait = limiter.retry_after(f"{request.endpoint}:{ip}")
            if wait:
                logger.warning(f"rate limit hit on {request.path} ip={ip}")
                response = jsonify({"error": "rate_limited"})
                response.headers["Retry-After"] = str(math.ceil(wait))
                return response, 429
            return view(*args, **kwargs)

        return cast(F, throttled)

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
