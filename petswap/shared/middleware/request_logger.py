# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from petswap.shared.config import load_config
from petswap.shared.logging import (
    bind_request_id,
    clear_request_context,
    current_request_id,
    logger,
)

REQUEST_ID_HEADER = "X-Request-ID"

# Values are replaced by a short fingerprint so two log lines can still be
# matched against each other.
_FINGERPRINTED_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return "<sha256:" + hashlib.sha256(value.encode()).hexdigest()[:8] + ">"


def _loggable_headers() -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _FINGERPRINTED_HEADERS else value
        for name, value in request.headers.items()
    }


def configure_request_logging(app: Flask) -> None:
    verbose = load_config().debug_logging

    @app.before_request
    def _open_request() -> None:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        bind_request_id(incoming[:64] or secrets.token_hex(6))
        g.request_started = time.perf_counter()
        if verbose:
            logger.debug(
                f"--> {request.method} {request.path} ip={client_ip()} "
                f"headers={_loggable_headers()} body={len(request.get_data())}B"
            )

    @app.after_request
    def _close_request(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        logger.info(
            f"<-- {request.method} {request.path} {response.status_code} "
            f"{elapsed_ms:.1f}ms ip={client_ip()} user={g.get('user_id')}"
        )
        response.headers[REQUEST_ID_HEADER] = current_request_id()
        return response

    @app.teardown_request
    def _reset_context(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_request_context()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
