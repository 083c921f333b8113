# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from petswap.application.use_cases.listings.bookings import (
    CreateBookingUseCase,
    ListBookingsUseCase,
)
from petswap.infrastructure.auth import AuthGate, authed_request
from petswap.interfaces.http.dto.listings import BookingDTO, CreateBookingRequestDTO
from petswap.shared.errors.validation import raise_validation_error


class BookingsController:
    def __init__(
        self,
        *,
        list_use_case: ListBookingsUseCase,
        create_use_case: CreateBookingUseCase,
        gate: AuthGate,
    ) -> None:
        self._list_use_case = list_use_case
        self._create_use_case = create_use_case
        self._gate = gate

    def list_bookings(self) -> tuple[Response, int]:
        bookings = self._list_use_case.execute(authed_request().user_id)
        items = [BookingDTO.from_booking(b).model_dump(by_alias=True, mode="json") for b in bookings]
        return jsonify(items), 200

    def create_booking(self) -> tuple[Response, int]:
        try:
            dto = CreateBookingRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        booking = self._create_use_case.execute(
            user_id=authed_request().user_id,
            property_id=dto.property_id,
            start_date=dto.start_date,
            end_date=dto.end_date,
        )
        return jsonify(BookingDTO.from_booking(booking).model_dump(by_alias=True, mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("bookings", __name__, url_prefix="/api/bookings")
        bp.add_url_rule("", view_func=self._gate.protect(self.list_bookings), methods=["GET"])
        bp.add_url_rule("", view_func=self._gate.protect(self.create_booking), methods=["POST"])
        return bp
