# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import IssuedToken, TokenClaims


class TokenService(Protocol):
    def issue(self, user_id: str) -> IssuedToken: ...
    def verify(self, token: str) -> TokenClaims: ...
