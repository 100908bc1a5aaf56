# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError

from postboard.domain.users.entities import User as DomainUser
from postboard.domain.users.exceptions import UserAlreadyExistsError
from postboard.domain.users.repositories import UserRepository
from postboard.infrastructure.db.models import Post, User
from postboard.infrastructure.db.session import session_scope
from postboard.infrastructure.repositories._mapping import as_utc
from postboard.shared.logging import logger


def _to_domain(row: User, post_ids: Sequence[str] = ()) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        post_ids=tuple(post_ids),
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            post_ids = [
                post_id
                for (post_id,) in session.query(Post.id)
                .filter(Post.author_id == user_id)
                .order_by(Post.created_at.asc())
                .all()
            ]
            return _to_domain(row, post_ids)

    def add(self, email: str, password_hash: str) -> DomainUser:
        # The unique index on users.email decides duplicates; no pre-check.
        try:
            with session_scope() as session:
                row = User(email=email, password_hash=password_hash)
                session.add(row)
                session.flush()
                user = _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: duplicate email rejected by unique index")
            raise UserAlreadyExistsError() from exc
        return user
