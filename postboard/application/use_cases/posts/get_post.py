# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.auth.entities import RequestContext
from postboard.domain.posts.entities import Post
from postboard.domain.posts.exceptions import PostNotFoundError
from postboard.domain.posts.repositories import PostRepository


class GetPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, ctx: RequestContext, post_id: str) -> Post:
        # Any authenticated caller may read any post by id; only the
        # listing is scoped to the caller.
        ctx.require_user()
        post = self._posts.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(context={"post_id": post_id})
        return post
