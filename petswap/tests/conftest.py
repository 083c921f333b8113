from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

import pytest

# Must be in place before any petswap module reads the configuration.
_TMP_DIR = tempfile.mkdtemp(prefix="petswap-tests-")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-only-signing-secret-0123456789")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "test.log")
os.environ["ENABLE_RATE_LIMIT"] = "false"


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from petswap.infrastructure.db import ENGINE, Base
    from petswap.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
