# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import inspect, text

from userhub.infrastructure.db import ENGINE
from userhub.infrastructure.db.models import User


def check_database() -> dict[str, str]:
    """Ping the database and report whether the users table exists.

    Connection failures propagate to the caller.
    """
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
        has_users = inspect(connection).has_table(User.__tablename__)
    return {"database": "ok", "users_table": "present" if has_users else "missing"}


__all__ = ["check_database"]
