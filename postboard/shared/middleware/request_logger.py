# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from time import perf_counter

from flask import Flask, Response, g, request

from postboard.shared.config import AppConfig, load_config
from postboard.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def configure_request_logging(app: Flask, config: AppConfig | None = None) -> None:
    """Log one line when a request starts and one when it ends.

    The end line carries the status, the duration and ``g.user_id`` when the
    identity guard resolved a user. The correlation id comes from
    ``X-Request-ID`` when the client sends one and is echoed back.
    """

    verbose = (config or load_config()).debug_logging

    @app.before_request
    def _start() -> None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6)
        set_correlation_id(request_id)
        g.request_id = request_id
        g.request_started = perf_counter()
        if verbose:
            logger.debug(
                f"-> {request.method} {request.full_path.rstrip('?')} from {_client_ip()} "
                f"content_length={request.content_length or 0}"
            )
        else:
            logger.info(f"-> {request.method} {request.path}")

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (perf_counter() - g.get("request_started", perf_counter())) * 1000
        logger.info(
            f"<- {request.method} {request.path} {response.status_code} "
            f"{elapsed_ms:.1f}ms user={g.get('user_id', '-')}"
        )
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("request_id", "-"))
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
