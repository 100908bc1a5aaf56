# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from postboard.domain.auth.entities import RequestContext
from postboard.domain.exceptions import InvariantViolation
from postboard.domain.posts.entities import Post, validate_message
from postboard.domain.posts.repositories import PostRepository
from postboard.shared.errors import ValidationError
from postboard.shared.logging import logger


class CreatePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, ctx: RequestContext, message: str) -> Post:
        author = ctx.require_user()
        try:
            validate_message(message)
        except InvariantViolation as exc:
            raise ValidationError(
                messages=[str(exc)], context={"fields": [exc.field]}
            ) from exc

        post = self._posts.add(message, author.id)
        logger.info(f"posts.create: ok post_id={post.id} author_id={author.id}")
        return post
