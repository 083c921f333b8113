# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    phone: str | None
    created_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:

    user_id: int
    token: str
    expires_at: datetime
