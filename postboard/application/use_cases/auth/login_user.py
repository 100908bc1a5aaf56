# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.auth.entities import IssuedToken
from postboard.domain.auth.exceptions import InvalidCredentialsError
from postboard.domain.auth.ports import TokenService
from postboard.domain.users.exceptions import UserNotFoundError
from postboard.domain.users.repositories import PasswordHasher, UserRepository
from postboard.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> IssuedToken:
        user = self._users.find_by_email(email)
        if user is None:
            logger.info("auth.login: unknown email")
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: bad password user_id={user.id}")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(user.id)
        logger.info(f"auth.login: ok user_id={user.id} exp={issued.expires_at.isoformat()}")
        return issued
