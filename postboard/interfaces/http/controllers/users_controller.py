# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from postboard.application.use_cases.users.register_user import RegisterUserUseCase
from postboard.interfaces.http.dto.users import PublicUserDTO, SignupRequestDTO
from postboard.shared.errors.validation import raise_validation_error


class UsersController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def create(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.email, dto.password)
        return jsonify(PublicUserDTO.from_entity(user).to_json()), 201

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self.create, methods=["POST"])
        return bp
