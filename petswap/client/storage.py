# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
import os
from pathlib import Path

from petswap.shared.logging import logger

TOKEN_KEY = "token"


class FileTokenStore:
    """Keeps the bearer token as a single string under ``TOKEN_KEY`` in a local JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, object]:
        try:
            with open(self._path, encoding="utf-8") as f:
                loaded = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning(f"token_store: unreadable {self._path.name} ({type(exc).__name__})")
            return {}
        return loaded if isinstance(loaded, dict) else {}

    def _write(self, data: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, self._path)

    def get(self) -> str | None:
        value = self._read().get(TOKEN_KEY)
        return value if isinstance(value, str) and value else None

    def set(self, token: str) -> None:
        data = self._read()
        data[TOKEN_KEY] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if TOKEN_KEY not in data:
            return
        data.pop(TOKEN_KEY, None)
        self._write(data)


class MemoryTokenStore:
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


__all__ = ["FileTokenStore", "MemoryTokenStore", "TOKEN_KEY"]
