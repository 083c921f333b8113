# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error hierarchy rendered to clients as ``{"error": code[, "context"]}``.

``code`` is the stable, machine-readable identifier the client shows or maps
to a message; ``context`` carries optional non-sensitive details.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code}
        if self.context:
            body["context"] = dict(self.context)
        return body


class DomainError(AppError):
    """Business-rule failure; subclasses pin ``error_code`` and ``http_status``."""

    error_code: ClassVar[str] = "domain_error"
    http_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(code=self.error_code, status=self.http_status, context=context)


class ValidationError(DomainError):
    error_code = "validation_error"
    http_status = HTTPStatus.UNPROCESSABLE_ENTITY


class UnauthenticatedError(DomainError):
    """Missing, malformed, expired or foreign token. Always the same body."""

    error_code = "unauthenticated"
    http_status = HTTPStatus.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__()


class PropertyNotFoundError(DomainError):
    error_code = "property_not_found"
    http_status = HTTPStatus.NOT_FOUND

    def __init__(self, property_id: int) -> None:
        super().__init__({"property_id": property_id})
