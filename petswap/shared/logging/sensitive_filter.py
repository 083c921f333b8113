# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

# Order matters: whole JWTs and digests go first so the keyword rules below
# never leave half a token behind.
_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(pattern, flags), replacement)
    for pattern, replacement, flags in (
        (r"\beyJ[\w-]+\.[\w-]+\.[\w-]+", "***JWT***", 0),
        (r"\b(?:scrypt|pbkdf2)[^\s$]*\$[^\s$]+\$[0-9a-f]+", "***DIGEST***", 0),
        (r"(bearer\s+)[\w.~+/=-]{8,}", rf"\1{_REDACTED}", re.IGNORECASE),
        (r"(authorization\s*[:=]\s*['\"]?)[^'\"\s,]{8,}", rf"\1{_REDACTED}", re.IGNORECASE),
        (r"((?:jwt_?)?secret(?:_?key)?\s*[:=]\s*['\"]?)[^'\"\s,]{6,}", rf"\1{_REDACTED}", re.IGNORECASE),
        (r"((?:password|passwd|pwd)\s*[:=]\s*['\"]?)[^'\"\s,]+", rf"\1{_REDACTED}", re.IGNORECASE),
        (r"(token\s*[:=]\s*['\"]?)[\w.-]{16,}", rf"\1{_REDACTED}", re.IGNORECASE),
        (r"((?:postgres(?:ql)?|mysql)(?:\+\w+)?://[^:/\s]+:)[^@\s]+@", rf"\1{_REDACTED}@", 0),
        (r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,})", r"***@\1", 0),
        (r"(phone\s*[:=]\s*['\"]?)\+?\d[\d\s-]{6,17}\d", r"\1***PHONE***", re.IGNORECASE),
    )
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru ``filter`` hook: scrub the message in place, never drop the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
