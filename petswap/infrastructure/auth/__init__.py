# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import AuthedRequest, AuthGate, authed_request, extract_bearer_token

__all__ = ["AuthGate", "AuthedRequest", "authed_request", "extract_bearer_token"]
