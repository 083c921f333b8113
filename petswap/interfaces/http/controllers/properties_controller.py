# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from petswap.application.use_cases.listings.properties import (
    CreatePropertyUseCase,
    GetPropertyUseCase,
    ListPropertiesUseCase,
)
from petswap.infrastructure.auth import AuthGate, authed_request
from petswap.interfaces.http.dto.listings import CreatePropertyRequestDTO, PropertyDTO
from petswap.shared.errors.validation import raise_validation_error


class PropertiesController:
    def __init__(
        self,
        *,
        list_use_case: ListPropertiesUseCase,
        get_use_case: GetPropertyUseCase,
        create_use_case: CreatePropertyUseCase,
        gate: AuthGate,
    ) -> None:
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._gate = gate

    def list_properties(self) -> tuple[Response, int]:
        items = [
            PropertyDTO.from_property(p).model_dump(by_alias=True, mode="json")
            for p in self._list_use_case.execute()
        ]
        return jsonify(items), 200

    def get_property(self, property_id: int) -> tuple[Response, int]:
        found = self._get_use_case.execute(property_id)
        return jsonify(PropertyDTO.from_property(found).model_dump(by_alias=True, mode="json")), 200

    def create_property(self) -> tuple[Response, int]:
        try:
            dto = CreatePropertyRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        created = self._create_use_case.execute(authed_request().user_id, dto.to_domain())
        return jsonify(PropertyDTO.from_property(created).model_dump(by_alias=True, mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("properties", __name__, url_prefix="/api/properties")
        bp.add_url_rule("", view_func=self.list_properties, methods=["GET"])
        bp.add_url_rule("/<int:property_id>", view_func=self.get_property, methods=["GET"])
        bp.add_url_rule(
            "", view_func=self._gate.protect(self.create_property), methods=["POST"]
        )
        return bp
