# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from petswap.domain.users.entities import User
from petswap.domain.users.exceptions import UserAlreadyExistsError
from petswap.domain.users.repositories import PasswordHasher, TokenService, UserRepository


@dataclass(slots=True, frozen=True)
class RegisterUserInput:
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""
    phone: str | None = None


class RegisterUserUseCase:
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

    def execute(self, data: RegisterUserInput) -> tuple[User, str]:
        existing = self._users.find_by_email(data.email)
        if existing:
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(data.password)
        user = User(
            id=0,
            email=data.email,
            password_hash=hashed,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone or None,
            created_at=datetime.now(UTC),
        )
        # add() raises UserAlreadyExistsError itself if a concurrent insert won.
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.id)
        return persisted, token.token
