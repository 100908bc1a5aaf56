# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.get_post import GetPostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.domain.auth.entities import RequestContext
from postboard.interfaces.http.auth import IdentityGuard
from postboard.interfaces.http.dto.posts import CreatePostRequestDTO, PublicPostDTO
from postboard.shared.errors.validation import raise_validation_error
from postboard.shared.logging import logger


class PostsController:
    def __init__(
        self,
        *,
        create_use_case: CreatePostUseCase,
        get_use_case: GetPostUseCase,
        list_use_case: ListPostsUseCase,
        guard: IdentityGuard,
    ) -> None:
        self._create_use_case = create_use_case
        self._get_use_case = get_use_case
        self._list_use_case = list_use_case
        self._guard = guard

    def as_blueprint(self) -> Blueprint:
        protect = self._guard.protect
        bp = Blueprint("posts", __name__, url_prefix="/posts")
        bp.add_url_rule("", view_func=protect(self.list_posts), methods=["GET"])
        bp.add_url_rule("", view_func=protect(self.create), methods=["POST"])
        bp.add_url_rule("/<post_id>", view_func=protect(self.get), methods=["GET"])
        return bp

    def create(self, ctx: RequestContext) -> tuple[Response, int]:
        try:
            dto = CreatePostRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        post = self._create_use_case.execute(ctx, dto.message)
        return jsonify(PublicPostDTO.from_entity(post).to_json()), 201

    def list_posts(self, ctx: RequestContext) -> tuple[Response, int]:
        t0 = perf_counter()
        posts = self._list_use_case.execute(ctx)
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"posts.list: ok (user_id={ctx.require_user().id}, n={len(posts)}, dt_ms={dt:.0f})"
        )
        return jsonify([PublicPostDTO.from_entity(post).to_json() for post in posts]), 200

    def get(self, post_id: str, ctx: RequestContext) -> tuple[Response, int]:
        post = self._get_use_case.execute(ctx, post_id)
        return jsonify(PublicPostDTO.from_entity(post).to_json()), 200
