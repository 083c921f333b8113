# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from petswap.domain.listings.entities import MAX_ROW_ID, NewProperty, Property
from petswap.domain.listings.repositories import PropertyRepository
from petswap.shared.errors import PropertyNotFoundError
from petswap.shared.logging import logger


class ListPropertiesUseCase:
    def __init__(self, *, properties: PropertyRepository) -> None:
        self._properties = properties

    def execute(self) -> Sequence[Property]:
        return self._properties.list_all()


class GetPropertyUseCase:
    def __init__(self, *, properties: PropertyRepository) -> None:
        self._properties = properties

    def execute(self, property_id: int) -> Property:
        if not 1 <= property_id <= MAX_ROW_ID:
            raise PropertyNotFoundError(property_id)
        found = self._properties.get(property_id)
        if found is None:
            raise PropertyNotFoundError(property_id)
        return found


class CreatePropertyUseCase:
    def __init__(self, *, properties: PropertyRepository) -> None:
        self._properties = properties

    def execute(self, owner_id: int, data: NewProperty) -> Property:
        created = self._properties.add(owner_id, data)
        logger.info(f"properties.create: id={created.id} owner={owner_id}")
        return created
