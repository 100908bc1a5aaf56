"""Use-case for reading the authenticated user's own record."""

from __future__ import annotations

from postboard.domain.auth.entities import RequestContext
from postboard.domain.auth.exceptions import UnauthenticatedError
from postboard.domain.users.entities import User
from postboard.domain.users.repositories import UserRepository


class GetProfileUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, ctx: RequestContext) -> User:
        current = ctx.require_user()
        user = self._users.find_by_id(current.id)
        if user is None:
            raise UnauthenticatedError()
        return user
