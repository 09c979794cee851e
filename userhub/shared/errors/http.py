# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON error responses for the Flask app.

Every failure leaves the service as ``{"error": <code>, "context": {...}}``:
``AppError`` subclasses carry their own code and status, werkzeug HTTP errors
are reshaped from their name, and anything else becomes ``internal_error``.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from userhub.shared.config import load_config
from userhub.shared.logging import logger

from .base import AppError


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _http_error_code(exc: HTTPException) -> str:
    return (exc.name or "http_error").lower().replace(" ", "_")


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    debug_mode = load_config().debug_logging

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        where = f"{request.method} {request.path}"
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.error(f"{exc.code} on {where}")
        else:
            logger.warning(f"{exc.code} ({int(exc.status)}) on {where}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = exc.code or default_status
        return jsonify({"error": _http_error_code(exc)}), status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled {type(exc).__name__} on {request.method} {request.path}, "
                f"user={getattr(g, 'user_id', None)}, body_size={len(request.data)}"
            )
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.path}")
        return jsonify({"error": "internal_error"}), default_status
