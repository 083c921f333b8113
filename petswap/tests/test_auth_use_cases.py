from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from petswap.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from petswap.application.use_cases.users.login_user import LoginUserUseCase
from petswap.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from petswap.domain.users.entities import IssuedToken, User
from petswap.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from petswap.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from petswap.shared.errors import UnauthenticatedError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        if user.email in self._users:
            raise UserAlreadyExistsError()
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.email] = new_user
        return new_user


class CountingTokenService(TokenService):
    def __init__(self) -> None:
        self.issued: list[int] = []

    def issue(self, user_id: int, *, now: datetime | None = None) -> IssuedToken:
        self.issued.append(user_id)
        return IssuedToken(
            user_id=user_id,
            token=f"token-{user_id}",
            expires_at=(now or datetime.now(UTC)) + timedelta(days=7),
        )

    def verify(self, token: str) -> int | None:
        return int(token.removeprefix("token-")) if token.startswith("token-") else None


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> CountingTokenService:
    return CountingTokenService()


@pytest.fixture()
def register(users: InMemoryUserRepository, tokens: CountingTokenService) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository, tokens: CountingTokenService) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user, token = register.execute(
        RegisterUserInput(
            email="a@x.com", password="longenough1", first_name="Ann", last_name="Lee"
        )
    )

    assert user.id == 1
    assert user.email == "a@x.com"
    assert user.first_name == "Ann"
    assert user.password_hash == "hashed:longenough1"
    assert token == "token-1"
    assert users.find_by_email("a@x.com") == user


def test_register_blank_phone_stored_as_none(register: RegisterUserUseCase) -> None:
    user, _ = register.execute(RegisterUserInput(email="a@x.com", password="pw", phone=""))
    assert user.phone is None


def test_register_duplicate_raises_and_keeps_first_digest(
    register: RegisterUserUseCase, users: InMemoryUserRepository, tokens: CountingTokenService
) -> None:
    register.execute(RegisterUserInput(email="a@x.com", password="longenough1"))

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        register.execute(RegisterUserInput(email="a@x.com", password="different123"))

    assert exc_info.value.status == 409
    assert users.find_by_email("a@x.com").password_hash == "hashed:longenough1"
    assert tokens.issued == [1]


def test_email_equality_is_case_sensitive(register: RegisterUserUseCase) -> None:
    first, _ = register.execute(RegisterUserInput(email="a@x.com", password="pw"))
    second, _ = register.execute(RegisterUserInput(email="A@x.com", password="pw"))
    assert first.id != second.id


def test_login_user_success(register: RegisterUserUseCase, login: LoginUserUseCase) -> None:
    registered, _ = register.execute(RegisterUserInput(email="a@x.com", password="longenough1"))

    user, token = login.execute("a@x.com", "longenough1")

    assert user == registered
    assert token == "token-1"


def test_wrong_password_and_unknown_email_are_indistinguishable(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute(RegisterUserInput(email="a@x.com", password="longenough1"))

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("a@x.com", "wrong-password")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        login.execute("nobody@x.com", "longenough1")

    assert wrong_password.value.to_dict() == unknown_email.value.to_dict()
    assert wrong_password.value.status == unknown_email.value.status == 401


def test_failed_login_issues_no_token(
    login: LoginUserUseCase, tokens: CountingTokenService
) -> None:
    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody@x.com", "whatever")
    assert tokens.issued == []


def test_current_user_resolves_existing_identity(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    registered, _ = register.execute(RegisterUserInput(email="a@x.com", password="pw"))
    assert GetCurrentUserUseCase(users=users).execute(registered.id) == registered


def test_current_user_for_missing_identity_is_unauthenticated(
    users: InMemoryUserRepository,
) -> None:
    with pytest.raises(UnauthenticatedError):
        GetCurrentUserUseCase(users=users).execute(999)
