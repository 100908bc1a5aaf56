# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request identity resolution for protected views.

``NoCredential -> CredentialPresented -> {Verified, Rejected}``: a view
wrapped by :meth:`IdentityGuard.protect` only runs once the cookie credential
has been verified, and receives the resolved identity as ``ctx``.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from flask import g, request

from postboard.domain.auth.entities import RequestContext
from postboard.domain.auth.exceptions import UnauthenticatedError
from postboard.domain.users.entities import User
from postboard.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


class IdentityResolver(Protocol):
    def execute(self, token: str | None) -> User: ...


class IdentityGuard:
    def __init__(self, *, resolver: IdentityResolver, cookie_name: str = "access_token") -> None:
        self._resolver = resolver
        self._cookie_name = cookie_name

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def credential(self) -> str | None:
        return request.cookies.get(self._cookie_name) or None

    def authenticate(self) -> RequestContext:
        token = self.credential()
        if not token:
            logger.warning(
                f"No {self._cookie_name} cookie on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthenticatedError()

        try:
            user = self._resolver.execute(token)
        except UnauthenticatedError:
            logger.warning(f"Auth failed on {request.method} {request.path}")
            raise

        g.user_id = user.id
        logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
        return RequestContext(user=user)

    def protect(self, view: F) -> F:
        @wraps(view)
        def inner(*args: Any, **kwargs: Any) -> Any:
            ctx = self.authenticate()
            return view(*args, ctx=ctx, **kwargs)

        return inner  # type: ignore[return-value]
