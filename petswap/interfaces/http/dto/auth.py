from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from petswap.domain.users.entities import User

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)


class RegisterRequestDTO(_CamelModel):
    email: str = Field(min_length=3, max_length=320)
    password: str = Field(min_length=8, max_length=128)
    first_name: str = Field("", max_length=128)
    last_name: str = Field("", max_length=128)
    phone: str | None = Field(None, max_length=32)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not _EMAIL_RE.match(value):
            raise PydanticCustomError(
                "email_invalid",
                "Email must look like name@domain.tld",
                {},
            )
        return value

    @field_validator("phone")
    @classmethod
    def empty_phone_is_none(cls, value: str | None) -> str | None:
        return value or None


class LoginRequestDTO(_CamelModel):
    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login


class UserDTO(_CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_user(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )


class MeDTO(UserDTO):
    phone: str | None = None

    @classmethod
    def from_user(cls, user: User) -> MeDTO:
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
        )


class AuthSuccessDTO(_CamelModel):
    token: str
    user: UserDTO
