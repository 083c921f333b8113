# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from petswap.shared.config import load_config
from petswap.shared.config.settings import DatabaseConfig
from petswap.shared.logging import logger


class Base(DeclarativeBase):
    pass


def build_engine(database: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    if database.url.startswith("sqlite"):
        # Flask serves requests from several threads; SQLite waits on locks instead of failing.
        connect_args = {"check_same_thread": False, "timeout": int(database.pool_timeout)}
    return create_engine(
        database.url,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        connect_args=connect_args,
    )


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """One unit of work: commit on success, roll back and re-raise on error."""
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("db: rolling back unit of work")
        session.rollback()
        raise
    finally:
        SessionLocal.remove()


def init_db() -> None:
    from petswap.infrastructure.db import models  # noqa: F401  registers tables

    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"db: schema ready on {ENGINE.url.render_as_string(hide_password=True)}")
