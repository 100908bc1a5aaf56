# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from postboard.shared.errors.base import DomainError

_UNAUTHORIZED = HTTPStatus.UNAUTHORIZED


class UnauthenticatedError(
    DomainError, code="unauthorized", status=_UNAUTHORIZED, message="Unauthorized"
):
    """The only auth failure a client ever sees on a protected route."""


class InvalidCredentialsError(
    DomainError, code="invalid_credentials", status=_UNAUTHORIZED, message="Invalid password."
):
    pass


# Raised by the token service only; ResolveIdentityUseCase folds all of them
# into UnauthenticatedError.
class TokenError(DomainError, code="token_error", status=_UNAUTHORIZED, message="Unauthorized"):
    pass


class InvalidTokenError(TokenError, code="invalid_token"):
    pass


class ExpiredTokenError(TokenError, code="expired_token"):
    pass


class MalformedTokenError(TokenError, code="malformed_token"):
    pass
