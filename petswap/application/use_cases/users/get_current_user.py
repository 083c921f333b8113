"""Use-case for resolving the identity behind a verified token."""

from __future__ import annotations

from petswap.domain.users.entities import User
from petswap.domain.users.repositories import UserRepository
from petswap.shared.errors import UnauthenticatedError


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.find_by_id(user_id)
        if user is None:
            # Valid signature but the account is gone.
            raise UnauthenticatedError()
        return user
