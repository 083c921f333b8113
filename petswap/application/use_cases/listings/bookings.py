# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from petswap.domain.listings.entities import Booking
from petswap.domain.listings.repositories import BookingRepository, PropertyRepository
from petswap.shared.errors import PropertyNotFoundError
from petswap.shared.logging import logger


class ListBookingsUseCase:
    def __init__(self, *, bookings: BookingRepository) -> None:
        self._bookings = bookings

    def execute(self, user_id: int) -> Sequence[Booking]:
        return self._bookings.list_for_user(user_id)


class CreateBookingUseCase:
    """Books a stay. Dates are stored as given; overlaps are not checked."""

    def __init__(
        self, *, bookings: BookingRepository, properties: PropertyRepository
    ) -> None:
        self._bookings = bookings
        self._properties = properties

    def execute(
        self, *, user_id: int, property_id: int, start_date: date, end_date: date
    ) -> Booking:
        if self._properties.get(property_id) is None:
            raise PropertyNotFoundError(property_id)
        booking = self._bookings.add(
            user_id=user_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date,
        )
        logger.info(
            f"bookings.create: id={booking.id} property={property_id} user={user_id}"
        )
        return booking
