"""Loguru setup shared by the API server and the client library.

Every record carries the id of the HTTP request it was emitted under and,
once the auth gate has run, the authenticated user id. Both live in
``ContextVar``s so concurrent requests never see each other's values.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_LINE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[request_id]}</magenta> "
    "<yellow>uid={extra[user_id]}</yellow> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
_UNSET = "-"

_REQUEST_ID: ContextVar[str] = ContextVar("petswap_request_id", default=_UNSET)
_USER_ID: ContextVar[str] = ContextVar("petswap_user_id", default=_UNSET)


def _context() -> dict[str, str]:
    return {"request_id": _REQUEST_ID.get(), "user_id": _USER_ID.get()}


def _default_log_file() -> Path:
    configured = os.getenv("LOG_FILE")
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parents[2] / "instance" / "petswap.log"


class _StdlibBridge(logging.Handler):
    """Route werkzeug/sqlalchemy/httpx records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.opt(depth=6, exception=record.exc_info).bind(**_context()).log(
            level, record.getMessage()
        )


class ContextualLogger:
    """Loguru proxy that binds the current request context on every call."""

    def __getattr__(self, name):  # pragma: no cover
        return getattr(_logger.bind(**_context()), name)


def bind_request_id(value: str | None) -> None:
    _REQUEST_ID.set(value or _UNSET)


def bind_user_id(user_id: int | None) -> None:
    _USER_ID.set(_UNSET if user_id is None else str(user_id))


def current_request_id() -> str:
    return _REQUEST_ID.get()


def clear_request_context() -> None:
    _REQUEST_ID.set(_UNSET)
    _USER_ID.set(_UNSET)


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    """(Re)configure sinks; safe to call once per app instance."""
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    log_file = _default_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    sink_options = {
        "level": level,
        "format": _LINE,
        "backtrace": False,
        # Never render local variables: they can hold passwords and tokens.
        "diagnose": False,
        "filter": sanitize_record,
    }
    _logger.remove()
    _logger.configure(extra={"request_id": _UNSET, "user_id": _UNSET})
    _logger.add(sys.stderr, colorize=True, **sink_options)
    _logger.add(str(log_file), colorize=False, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    for noisy, floor in (("werkzeug", logging.INFO), ("httpx", logging.WARNING), ("sqlalchemy", logging.WARNING)):
        logging.getLogger(noisy).setLevel(floor)


logger = ContextualLogger()

__all__ = [
    "bind_request_id",
    "bind_user_id",
    "clear_request_context",
    "current_request_id",
    "logger",
    "setup_logging",
]
