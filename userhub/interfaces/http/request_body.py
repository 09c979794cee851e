# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from flask import request

from userhub.shared.errors.base import ValidationError


def json_body() -> Any:
    """Return the decoded JSON body, or ``{}`` when the request has none.

    A body that is present but cannot be decoded raises ``invalid_json``.
    """
    body = request.get_json(silent=True)
    if body is not None:
        return body
    if request.get_data(cache=True):
        raise ValidationError(code="invalid_json")
    return {}


__all__ = ["json_body"]
