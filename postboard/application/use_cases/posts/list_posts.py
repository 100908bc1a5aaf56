# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.auth.entities import RequestContext
from postboard.domain.posts.entities import Post
from postboard.domain.posts.repositories import PostRepository


class ListPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, ctx: RequestContext) -> list[Post]:
        author = ctx.require_user()
        return list(self._posts.find_many_by_author(author.id))
