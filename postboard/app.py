# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from postboard.infrastructure.container import Container
from postboard.infrastructure.db import init_db
from postboard.interfaces.http.controllers.misc_controller import MiscController
from postboard.shared.config import AppConfig, load_config
from postboard.shared.logging import logger, setup_logging
from postboard.shared.middleware.error_handler import configure_error_handling
from postboard.shared.middleware.request_logger import configure_request_logging
from postboard.shared.middleware.security_headers import configure_security_headers


def create_app(container: Container | None = None, config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db(config.database)

    container = container or Container(config)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    configure_error_handling(app, config)
    configure_request_logging(app, config)
    configure_security_headers(app, config)

    cors_kwargs: dict[str, object] = {"origins": config.security.allowed_origins}
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    auth_bp = container.auth_controller.as_blueprint()
    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(auth_bp)
    # same routes under /auth for clients using /auth/login and /auth/user
    app.register_blueprint(auth_bp, url_prefix="/auth", name="auth_prefixed")
    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
