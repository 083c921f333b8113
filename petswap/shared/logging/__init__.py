# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .logger import (
    bind_request_id,
    bind_user_id,
    clear_request_context,
    current_request_id,
    logger,
    setup_logging,
)
from .sensitive_filter import sanitize_message

__all__ = [
    "bind_request_id",
    "bind_user_id",
    "clear_request_context",
    "current_request_id",
    "logger",
    "sanitize_message",
    "setup_logging",
]
