# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from postboard.domain.auth.exceptions import UnauthenticatedError
from postboard.domain.users.entities import User


@dataclass(slots=True, frozen=True)
class TokenClaims:
    user_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedToken:
    token: str
    user_id: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class RequestContext:
    """Identity resolved for a single request, handed explicitly to handlers."""

    user: User | None = None

    def require_user(self) -> User:
        if self.user is None:
            raise UnauthenticatedError()
        return self.user
