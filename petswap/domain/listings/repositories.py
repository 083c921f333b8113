# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from .entities import Booking, NewProperty, Property


class PropertyRepository(Protocol):
    def list_all(self) -> Sequence[Property]: ...
    def get(self, property_id: int) -> Property | None: ...
    def add(self, owner_id: int, data: NewProperty) -> Property: ...


class BookingRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Booking]: ...
    def add(
        self, *, user_id: int, property_id: int, start_date: date, end_date: date
    ) -> Booking: ...
