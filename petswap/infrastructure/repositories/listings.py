# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from petswap.domain.listings.entities import Booking as DomainBooking
from petswap.domain.listings.entities import NewProperty, OwnerSummary
from petswap.domain.listings.entities import Property as DomainProperty
from petswap.domain.listings.repositories import BookingRepository, PropertyRepository
from petswap.infrastructure.db.models import Booking, Property
from petswap.infrastructure.db.session import session_scope


def _property_to_domain(row: Property, *, with_owner: bool = True) -> DomainProperty:
    owner = None
    if with_owner and row.user is not None:
        owner = OwnerSummary(first_name=row.user.first_name, last_name=row.user.last_name)
    return DomainProperty(
        id=row.id,
        user_id=row.user_id,
        title=row.title,
        description=row.description or "",
        address=row.address,
        city=row.city,
        country=row.country,
        bedrooms=int(row.bedrooms or 0),
        bathrooms=int(row.bathrooms or 0),
        pets_allowed=row.pets_allowed or "",
        amenities=tuple(row.amenities or ()),
        images=tuple(row.images or ()),
        created_at=row.created_at,
        owner=owner,
    )


def _booking_to_domain(row: Booking) -> DomainBooking:
    return DomainBooking(
        id=row.id,
        property_id=row.property_id,
        user_id=row.user_id,
        start_date=row.start_date,
        end_date=row.end_date,
        created_at=row.created_at,
        property=_property_to_domain(row.property, with_owner=False) if row.property else None,
    )


class SqlAlchemyPropertyRepository(PropertyRepository):
    def list_all(self) -> Sequence[DomainProperty]:
        with session_scope() as session:
            rows = session.scalars(
                select(Property).options(joinedload(Property.user)).order_by(Property.id.asc())
            ).all()
            return [_property_to_domain(row) for row in rows]

    def get(self, property_id: int) -> DomainProperty | None:
        with session_scope() as session:
            row = session.get(Property, property_id, options=[joinedload(Property.user)])
            return _property_to_domain(row) if row else None

    def add(self, owner_id: int, data: NewProperty) -> DomainProperty:
        with session_scope() as session:
            row = Property(
                user_id=owner_id,
                title=data.title,
                description=data.description,
                address=data.address,
                city=data.city,
                country=data.country,
                bedrooms=data.bedrooms,
                bathrooms=data.bathrooms,
                pets_allowed=data.pets_allowed,
                amenities=list(data.amenities),
                images=list(data.images),
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _property_to_domain(row)


class SqlAlchemyBookingRepository(BookingRepository):
    def list_for_user(self, user_id: int) -> Sequence[DomainBooking]:
        with session_scope() as session:
            rows = session.scalars(
                select(Booking)
                .options(joinedload(Booking.property))
                .where(Booking.user_id == user_id)
                .order_by(Booking.start_date.asc(), Booking.id.asc())
            ).all()
            return [_booking_to_domain(row) for row in rows]

    def add(
        self, *, user_id: int, property_id: int, start_date: date, end_date: date
    ) -> DomainBooking:
        with session_scope() as session:
            row = Booking(
                user_id=user_id,
                property_id=property_id,
                start_date=start_date,
                end_date=end_date,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _booking_to_domain(row)
