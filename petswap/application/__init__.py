# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.listings.bookings import CreateBookingUseCase, ListBookingsUseCase
from .use_cases.listings.properties import (
    CreatePropertyUseCase,
    GetPropertyUseCase,
    ListPropertiesUseCase,
)
from .use_cases.users.get_current_user import GetCurrentUserUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserInput, RegisterUserUseCase

__all__ = [
    "CreateBookingUseCase",
    "CreatePropertyUseCase",
    "GetCurrentUserUseCase",
    "GetPropertyUseCase",
    "ListBookingsUseCase",
    "ListPropertiesUseCase",
    "LoginUserUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
]
