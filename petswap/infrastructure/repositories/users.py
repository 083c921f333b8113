# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from petswap.domain.users.entities import User as DomainUser
from petswap.domain.users.exceptions import UserAlreadyExistsError
from petswap.domain.users.repositories import UserRepository
from petswap.infrastructure.db.models import User
from petswap.infrastructure.db.session import session_scope
from petswap.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at or datetime.now(UTC)
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        first_name=row.first_name or "",
        last_name=row.last_name or "",
        phone=row.phone,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    email=user.email,
                    password_hash=user.password_hash,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    phone=user.phone,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: unique constraint hit, reporting conflict")
            raise UserAlreadyExistsError() from exc
