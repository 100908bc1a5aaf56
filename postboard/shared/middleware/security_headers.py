# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response

from postboard.shared.config import AppConfig, load_config

# JSON-only API: nothing is framed, embedded or sniffed
_API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}
_HSTS = "max-age=31536000; includeSubDomains"


def configure_security_headers(app: Flask, config: AppConfig | None = None) -> None:
    headers = dict(_API_HEADERS)
    if (config or load_config()).security.enable_hsts:
        headers["Strict-Transport-Security"] = _HSTS

    @app.after_request
    def _apply(response: Response) -> Response:
        for name, value in headers.items():
            response.headers.setdefault(name, value)
        return response


__all__ = ["configure_security_headers"]
