# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .api import GENERIC_ERROR_MESSAGE, ApiError, AuthResult, PetswapApiClient
from .session import ANONYMOUS, Session, SessionManager
from .storage import FileTokenStore, MemoryTokenStore

__all__ = [
    "ANONYMOUS",
    "ApiError",
    "AuthResult",
    "FileTokenStore",
    "GENERIC_ERROR_MESSAGE",
    "MemoryTokenStore",
    "PetswapApiClient",
    "Session",
    "SessionManager",
]
