# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, make_response, request
from pydantic import ValidationError

from postboard.application.use_cases.auth.login_user import LoginUserUseCase
from postboard.application.use_cases.users.get_profile import GetProfileUseCase
from postboard.domain.auth.entities import RequestContext
from postboard.interfaces.http.auth import IdentityGuard
from postboard.interfaces.http.dto.auth import LoginRequestDTO
from postboard.interfaces.http.dto.users import PublicUserDTO
from postboard.shared.config import AppConfig, load_config
from postboard.shared.errors.validation import raise_validation_error
from postboard.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        get_profile_use_case: GetProfileUseCase,
        guard: IdentityGuard,
        config: AppConfig | None = None,
    ) -> None:
        self._login_use_case = login_use_case
        self._get_profile_use_case = get_profile_use_case
        self._guard = guard
        self._config = config or load_config()

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        issued = self._login_use_case.execute(dto.email, dto.password)

        response = make_response("")
        response.set_cookie(
            self._guard.cookie_name,
            issued.token,
            httponly=True,
            secure=self._config.security.cookie_secure,
            samesite=self._config.security.cookie_samesite,
            max_age=int((issued.expires_at - issued.issued_at).total_seconds()),
        )
        logger.info(f"auth.login: cookie issued user_id={issued.user_id}")
        return response, 200

    def current_user(self, ctx: RequestContext) -> tuple[Response, int]:
        user = self._get_profile_use_case.execute(ctx)
        return jsonify(PublicUserDTO.from_entity(user).to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/user", view_func=self._guard.protect(self.current_user), methods=["GET"]
        )
        return bp
