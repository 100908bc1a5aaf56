# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from postboard.shared.config import AppConfig, load_config
from postboard.shared.logging import logger

from .base import AppError


def _error_body(code: str, status: HTTPStatus, message: str) -> dict[str, object]:
    return {"error": code, "statusCode": int(status), "message": message}


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(app: Flask, config: AppConfig | None = None) -> None:
    """Render every failure leaving a view as the JSON error body."""

    verbose = (config or load_config()).debug_logging

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        log = logger.warning if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else logger.info
        log(f"{request.method} {request.path} -> {int(exc.status)} {exc.code}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        status = HTTPStatus(exc.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        code = status.phrase.lower().replace(" ", "_")
        return jsonify(_error_body(code, status, status.phrase)), status

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        where = f"{request.method} {request.path} user={getattr(g, 'user_id', None)}"
        if verbose:
            logger.exception(f"Unhandled {type(exc).__name__} on {where}")
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {where}")

        status = HTTPStatus.INTERNAL_SERVER_ERROR
        return jsonify(_error_body("internal_error", status, status.phrase)), status
