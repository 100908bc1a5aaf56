# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from postboard.application.services.password_hashing import WerkzeugPasswordHasher
from postboard.application.services.tokens import JwtTokenService
from postboard.application.use_cases.auth.login_user import LoginUserUseCase
from postboard.application.use_cases.auth.resolve_identity import ResolveIdentityUseCase
from postboard.application.use_cases.posts.create_post import CreatePostUseCase
from postboard.application.use_cases.posts.get_post import GetPostUseCase
from postboard.application.use_cases.posts.list_posts import ListPostsUseCase
from postboard.application.use_cases.users.get_profile import GetProfileUseCase
from postboard.application.use_cases.users.register_user import RegisterUserUseCase
from postboard.infrastructure.repositories.posts.sqlalchemy_post_repository import (
    SqlAlchemyPostRepository,
)
from postboard.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from postboard.interfaces.http.auth import IdentityGuard
from postboard.interfaces.http.controllers.auth_controller import AuthController
from postboard.interfaces.http.controllers.posts_controller import PostsController
from postboard.interfaces.http.controllers.users_controller import UsersController
from postboard.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self._config.token_secret(),
            ttl_seconds=self._config.auth.access_token_ttl_seconds,
            algorithm=self._config.auth.jwt_algorithm,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository()

    # User / auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def resolve_identity_use_case(self) -> ResolveIdentityUseCase:
        return ResolveIdentityUseCase(users=self.user_repository, tokens=self.token_service)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(users=self.user_repository)

    # Post use cases

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository)

    @cached_property
    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(posts=self.post_repository)

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    # HTTP

    @cached_property
    def identity_guard(self) -> IdentityGuard:
        return IdentityGuard(
            resolver=self.resolve_identity_use_case,
            cookie_name=self._config.auth.cookie_name,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            get_profile_use_case=self.get_profile_use_case,
            guard=self.identity_guard,
            config=self._config,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(register_use_case=self.register_user_use_case)

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_use_case=self.create_post_use_case,
            get_use_case=self.get_post_use_case,
            list_use_case=self.list_posts_use_case,
            guard=self.identity_guard,
        )
