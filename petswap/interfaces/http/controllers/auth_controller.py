# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from petswap.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from petswap.application.use_cases.users.login_user import LoginUserUseCase
from petswap.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from petswap.infrastructure.auth import AuthGate, authed_request
from petswap.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    MeDTO,
    RegisterRequestDTO,
    UserDTO,
)
from petswap.shared.errors.validation import raise_validation_error
from petswap.shared.logging import logger
from petswap.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        gate: AuthGate,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._current_user_use_case = current_user_use_case
        self._gate = gate

    @rate_limit()
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(
            RegisterUserInput(
                email=dto.email,
                password=dto.password,
                first_name=dto.first_name,
                last_name=dto.last_name,
                phone=dto.phone,
            )
        )

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_user(user))
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload.model_dump(by_alias=True)), 200

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_user(user))
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload.model_dump(by_alias=True)), 200

    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(authed_request().user_id)
        return jsonify(MeDTO.from_user(user).model_dump(by_alias=True)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self._gate.protect(self.me), methods=["GET"])
        return bp
