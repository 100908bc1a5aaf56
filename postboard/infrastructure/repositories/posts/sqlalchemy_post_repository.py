# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from postboard.domain.posts.entities import Post as DomainPost
from postboard.domain.posts.repositories import PostRepository
from postboard.infrastructure.db.models import Post
from postboard.infrastructure.db.session import session_scope
from postboard.infrastructure.repositories._mapping import as_utc


def _to_domain(row: Post) -> DomainPost:
    return DomainPost(
        id=row.id,
        message=row.message,
        author_id=row.author_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyPostRepository(PostRepository):
    def add(self, message: str, author_id: str) -> DomainPost:
        with session_scope() as session:
            row = Post(message=message, author_id=author_id)
            session.add(row)
            session.flush()
            post = _to_domain(row)
        return post

    def find_by_id(self, post_id: str) -> DomainPost | None:
        with session_scope() as session:
            row = session.get(Post, post_id)
            if not row:
                return None
            return _to_domain(row)

    def find_many_by_author(self, author_id: str) -> Sequence[DomainPost]:
        with session_scope() as session:
            rows = (
                session.query(Post)
                .filter(Post.author_id == author_id)
                .order_by(Post.created_at.asc())
                .all()
            )
            return [_to_domain(row) for row in rows]
