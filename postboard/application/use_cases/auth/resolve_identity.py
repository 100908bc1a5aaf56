# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.auth.exceptions import TokenError, UnauthenticatedError
from postboard.domain.auth.ports import TokenService
from postboard.domain.users.entities import User
from postboard.domain.users.repositories import UserRepository
from postboard.shared.logging import logger


class ResolveIdentityUseCase:
    """Turns a transported credential into the user it was issued for.

    Every failure (no token, bad token, user gone) is reported as the same
    ``UnauthenticatedError`` so callers cannot probe which ids exist.
    """

    def __init__(self, *, users: UserRepository, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str | None) -> User:
        if not token:
            raise UnauthenticatedError()

        try:
            claims = self._tokens.verify(token)
        except TokenError as exc:
            logger.info(f"auth.resolve: rejected reason={exc.code}")
            raise UnauthenticatedError() from exc

        user = self._users.find_by_id(claims.user_id)
        if user is None:
            logger.info(f"auth.resolve: rejected reason=user_missing user_id={claims.user_id}")
            raise UnauthenticatedError()
        return user
