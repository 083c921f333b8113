# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

# Largest id a SQL INTEGER primary key can hold.
MAX_ROW_ID = 2**63 - 1


@dataclass(slots=True, frozen=True)
class OwnerSummary:

    first_name: str
    last_name: str


@dataclass(slots=True, frozen=True)
class Property:

    id: int
    user_id: int
    title: str
    description: str
    address: str
    city: str
    country: str
    bedrooms: int
    bathrooms: int
    pets_allowed: str
    amenities: tuple[str, ...] = ()
    images: tuple[str, ...] = ()
    created_at: datetime | None = None
    owner: OwnerSummary | None = None


@dataclass(slots=True, frozen=True)
class NewProperty:
    """Listing fields supplied by the owner; id and owner come from storage."""

    title: str
    description: str
    address: str
    city: str
    country: str
    bedrooms: int
    bathrooms: int
    pets_allowed: str
    amenities: tuple[str, ...] = field(default_factory=tuple)
    images: tuple[str, ...] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class Booking:

    id: int
    property_id: int
    user_id: int
    start_date: date
    end_date: date
    created_at: datetime | None = None
    property: Property | None = None
