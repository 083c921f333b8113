# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from petswap.application.services.password_hashing import WerkzeugPasswordHasher
from petswap.application.services.tokens import JwtTokenService, TokenSettings
from petswap.application.use_cases.listings.bookings import (
    CreateBookingUseCase,
    ListBookingsUseCase,
)
from petswap.application.use_cases.listings.properties import (
    CreatePropertyUseCase,
    GetPropertyUseCase,
    ListPropertiesUseCase,
)
from petswap.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from petswap.application.use_cases.users.login_user import LoginUserUseCase
from petswap.application.use_cases.users.register_user import RegisterUserUseCase
from petswap.infrastructure.auth import AuthGate
from petswap.infrastructure.repositories.listings import (
    SqlAlchemyBookingRepository,
    SqlAlchemyPropertyRepository,
)
from petswap.infrastructure.repositories.users import SqlAlchemyUserRepository
from petswap.interfaces.http.controllers.auth_controller import AuthController
from petswap.interfaces.http.controllers.bookings_controller import BookingsController
from petswap.interfaces.http.controllers.misc_controller import MiscController
from petswap.interfaces.http.controllers.properties_controller import PropertiesController
from petswap.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    # Auth core

    @cached_property
    def token_settings(self) -> TokenSettings:
        return TokenSettings.from_config(self.config)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(self.token_settings)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(self.token_service)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def property_repository(self) -> SqlAlchemyPropertyRepository:
        return SqlAlchemyPropertyRepository()

    @cached_property
    def booking_repository(self) -> SqlAlchemyBookingRepository:
        return SqlAlchemyBookingRepository()

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def list_properties_use_case(self) -> ListPropertiesUseCase:
        return ListPropertiesUseCase(properties=self.property_repository)

    @cached_property
    def get_property_use_case(self) -> GetPropertyUseCase:
        return GetPropertyUseCase(properties=self.property_repository)

    @cached_property
    def create_property_use_case(self) -> CreatePropertyUseCase:
        return CreatePropertyUseCase(properties=self.property_repository)

    @cached_property
    def list_bookings_use_case(self) -> ListBookingsUseCase:
        return ListBookingsUseCase(bookings=self.booking_repository)

    @cached_property
    def create_booking_use_case(self) -> CreateBookingUseCase:
        return CreateBookingUseCase(
            bookings=self.booking_repository, properties=self.property_repository
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            current_user_use_case=self.get_current_user_use_case,
            gate=self.auth_gate,
        )

    @cached_property
    def properties_controller(self) -> PropertiesController:
        return PropertiesController(
            list_use_case=self.list_properties_use_case,
            get_use_case=self.get_property_use_case,
            create_use_case=self.create_property_use_case,
            gate=self.auth_gate,
        )

    @cached_property
    def bookings_controller(self) -> BookingsController:
        return BookingsController(
            list_use_case=self.list_bookings_use_case,
            create_use_case=self.create_booking_use_case,
            gate=self.auth_gate,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
