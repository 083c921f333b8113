"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from petswap.domain.users.repositories import PasswordHasher
from petswap.shared.logging import logger

# scrypt with werkzeug's default cost parameters (N=2**15, r=8, p=1), 16-char salt.
DEFAULT_METHOD = "scrypt"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(
        self, *, method: str = DEFAULT_METHOD, salt_length: int = DEFAULT_SALT_LENGTH
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            # Unknown method or corrupt parameters in the stored digest.
            logger.warning(f"password.verify: unreadable digest ({type(exc).__name__})")
            return False
