# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from petswap.domain.users.entities import User
from petswap.domain.users.exceptions import InvalidCredentialsError
from petswap.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from petswap.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> tuple[User, str]:
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        if not password_valid:
            logger.info(f"auth.login: rejected known_email={user is not None}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id)
        return user, token.token
