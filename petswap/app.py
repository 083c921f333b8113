# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from petswap.infrastructure.container import Container, container as default_container
from petswap.infrastructure.db import init_db
from petswap.shared.config import load_config
from petswap.shared.logging import logger, setup_logging
from petswap.shared.middleware.error_handler import configure_error_handling
from petswap.shared.middleware.request_logger import configure_request_logging


def create_app(app_container: Container | None = None) -> Flask:
    # Raises on an unsafe configuration before anything else starts.
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    wiring = app_container or default_container

    app = Flask(__name__)
    app.json.sort_keys = False  # type: ignore[attr-defined]
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.allowed_origins}},
        supports_credentials=True,
    )
    app.register_blueprint(wiring.misc_controller.as_blueprint())
    app.register_blueprint(wiring.auth_controller.as_blueprint())
    app.register_blueprint(wiring.properties_controller.as_blueprint())
    app.register_blueprint(wiring.bookings_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=load_config().port, debug=load_config().is_development())
