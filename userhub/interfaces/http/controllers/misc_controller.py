# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping

from flask import Blueprint, Response, jsonify
from sqlalchemy.exc import SQLAlchemyError

from userhub.shared.logging import logger


class MiscController:
    def __init__(self, *, check_database: Callable[[], Mapping[str, str]]) -> None:
        self._check_database = check_database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self) -> str:
        return "Hello, World!"

    def health(self) -> tuple[Response, int]:
        try:
            report = dict(self._check_database())
        except SQLAlchemyError as exc:
            logger.error(f"health: database unreachable ({type(exc).__name__})")
            return jsonify({"ok": False, "database": "unreachable"}), 503

        ready = report.get("users_table") == "present"
        return jsonify({"ok": ready, **report}), (200 if ready else 503)
