# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from postboard.shared.errors.base import DomainError


class UserAlreadyExistsError(
    DomainError,
    code="user_already_exists",
    status=HTTPStatus.BAD_REQUEST,
    message="User already exists.",
):
    pass


class UserNotFoundError(
    DomainError, code="user_not_found", status=HTTPStatus.NOT_FOUND, message="User not found."
):
    pass
