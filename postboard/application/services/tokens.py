# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless signed access tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import jwt

from postboard.domain.auth.entities import IssuedToken, TokenClaims
from postboard.domain.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MalformedTokenError,
)
from postboard.domain.auth.ports import TokenService

_REQUIRED_CLAIMS = ["id", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issues and verifies ``{"id", "iat", "exp"}`` tokens.

    Validity is decided by signature and expiry only; nothing is stored
    server-side. A token stops being valid once ``now >= exp``.
    """

    def __init__(
        self,
        *,
        secret: str,
        ttl_seconds: int,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        if ttl_seconds <= 0:
            raise ValueError("token ttl must be positive")
        self._secret = secret
        self._ttl_seconds = ttl_seconds
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    def issue(self, user_id: str) -> IssuedToken:
        issued_at = int(self._clock().timestamp())
        expires_at = issued_at + self._ttl_seconds
        token = jwt.encode(
            {"id": user_id, "iat": issued_at, "exp": expires_at},
            self._secret,
            algorithm=self._algorithm,
        )
        return IssuedToken(
            token=token,
            user_id=user_id,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )

    def verify(self, token: str) -> TokenClaims:
        if not token or not isinstance(token, str):
            raise MalformedTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # expiry is checked below against the injected clock
                options={"verify_exp": False, "verify_iat": False, "require": _REQUIRED_CLAIMS},
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            raise InvalidTokenError() from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError() from exc

        user_id = payload.get("id")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(user_id, str) or not user_id:
            raise MalformedTokenError()
        if not isinstance(issued_at, (int, float)) or not isinstance(expires_at, (int, float)):
            raise MalformedTokenError()

        if self._clock().timestamp() >= expires_at:
            raise ExpiredTokenError()

        return TokenClaims(
            user_id=user_id,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
