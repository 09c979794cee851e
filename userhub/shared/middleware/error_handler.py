# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response

from userhub.shared.config import load_config
from userhub.shared.errors import register_error_handler


def configure_error_handling(app: Flask) -> None:
    """Install the JSON error handlers and the 401 challenge header."""
    register_error_handler(app)
    challenge = f'{load_config().token.scheme} realm="userhub"'

    @app.after_request
    def _challenge_unauthorized(response: Response) -> Response:
        if response.status_code == HTTPStatus.UNAUTHORIZED:
            response.headers.setdefault("WWW-Authenticate", challenge)
        return response
