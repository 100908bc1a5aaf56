# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.users.entities import User
from postboard.domain.users.repositories import PasswordHasher, UserRepository
from postboard.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> User:
        # Uniqueness is enforced by the store; a duplicate raises
        # UserAlreadyExistsError from ``add``.
        hashed = self._password_hasher.hash(password)
        user = self._users.add(email, hashed)
        logger.info(f"users.register: ok user_id={user.id}")
        return user
