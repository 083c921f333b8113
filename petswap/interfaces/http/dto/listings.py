# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from petswap.domain.listings.entities import (
    MAX_ROW_ID,
    Booking,
    NewProperty,
    OwnerSummary,
    Property,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)


class CreatePropertyRequestDTO(_CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=5000)
    address: str = Field(min_length=1, max_length=300)
    city: str = Field(min_length=1, max_length=120)
    country: str = Field(min_length=1, max_length=120)
    # The web form posts numbers as strings; lax mode coerces "2" -> 2.
    bedrooms: int = Field(ge=0, le=100)
    bathrooms: int = Field(ge=0, le=100)
    pets_allowed: str = Field("", max_length=200)
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)

    def to_domain(self) -> NewProperty:
        return NewProperty(
            title=self.title,
            description=self.description,
            address=self.address,
            city=self.city,
            country=self.country,
            bedrooms=self.bedrooms,
            bathrooms=self.bathrooms,
            pets_allowed=self.pets_allowed,
            amenities=tuple(self.amenities),
            images=tuple(self.images),
        )


class CreateBookingRequestDTO(_CamelModel):
    property_id: int = Field(ge=1, le=MAX_ROW_ID)
    start_date: date
    end_date: date

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _date_from_timestamp(cls, value: object) -> object:
        # Accept full ISO timestamps as sent by browsers ("2025-07-01T00:00:00.000Z").
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class OwnerDTO(_CamelModel):
    first_name: str
    last_name: str

    @classmethod
    def from_owner(cls, owner: OwnerSummary) -> OwnerDTO:
        return cls(first_name=owner.first_name, last_name=owner.last_name)


class PropertyDTO(_CamelModel):
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
    amenities: list[str]
    images: list[str]
    created_at: datetime | None = None
    user: OwnerDTO | None = None

    @classmethod
    def from_property(cls, prop: Property) -> PropertyDTO:
        return cls(
            id=prop.id,
            user_id=prop.user_id,
            title=prop.title,
            description=prop.description,
            address=prop.address,
            city=prop.city,
            country=prop.country,
            bedrooms=prop.bedrooms,
            bathrooms=prop.bathrooms,
            pets_allowed=prop.pets_allowed,
            amenities=list(prop.amenities),
            images=list(prop.images),
            created_at=prop.created_at,
            user=OwnerDTO.from_owner(prop.owner) if prop.owner else None,
        )


class BookingDTO(_CamelModel):
    id: int
    property_id: int
    user_id: int
    start_date: date
    end_date: date
    created_at: datetime | None = None
    property: PropertyDTO | None = None

    @classmethod
    def from_booking(cls, booking: Booking) -> BookingDTO:
        return cls(
            id=booking.id,
            property_id=booking.property_id,
            user_id=booking.user_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
            created_at=booking.created_at,
            property=PropertyDTO.from_property(booking.property) if booking.property else None,
        )
