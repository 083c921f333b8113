# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Booking, NewProperty, OwnerSummary, Property
from .repositories import BookingRepository, PropertyRepository

__all__ = [
    "Booking",
    "BookingRepository",
    "NewProperty",
    "OwnerSummary",
    "Property",
    "PropertyRepository",
]
