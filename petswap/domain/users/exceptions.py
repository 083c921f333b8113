# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from petswap.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    error_code = "email_already_exists"
    http_status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    # Same code for unknown email and wrong password.
    error_code = "invalid_credentials"
    http_status = HTTPStatus.UNAUTHORIZED
