# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IssuedToken, User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, TokenService, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "IssuedToken",
    "PasswordHasher",
    "TokenService",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
