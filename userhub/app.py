# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from userhub.domain.auth.exceptions import MissingSigningSecretError
from userhub.infrastructure.container import Container
from userhub.infrastructure.db import init_db
from userhub.shared.config import load_config
from userhub.shared.logging import logger, setup_logging
from userhub.shared.middleware.error_handler import configure_error_handling
from userhub.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug=config.debug_logging)

    container = container or Container(config)
    try:
        # Built eagerly so a missing secret stops the process at startup.
        signing = container.token_signing_config
    except MissingSigningSecretError:
        logger.critical("JWT_SECRET is not set; refusing to start")
        raise
    logger.info(f"Token signing ready: alg={signing.algorithm} ttl={signing.ttl}")

    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Content-Type", "Authorization"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
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

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080)
