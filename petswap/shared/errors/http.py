# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from petswap.shared.logging import logger

from .base import AppError

INTERNAL_ERROR = "internal_error"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _http_error_code(exc: HTTPException) -> str:
    return (exc.name or "http_error").lower().replace(" ", "_")


def register_error_handler(app: Flask) -> None:
    """Render every failure as ``{"error": <code>}``; internals stay in the log."""

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        logger.info(f"{exc.code} ({int(exc.status)}) on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_error(exc: HTTPException):
        return jsonify({"error": _http_error_code(exc)}), exc.code or HTTPStatus.INTERNAL_SERVER_ERROR

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        logger.opt(exception=exc).error(
            f"unhandled {type(exc).__name__} on {request.method} {request.path} "
            f"user={g.get('user_id')}"
        )
        return jsonify({"error": INTERNAL_ERROR}), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["INTERNAL_ERROR", "handle_app_error", "register_error_handler"]
