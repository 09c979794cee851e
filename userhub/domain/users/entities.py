# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class UserIdentity:
    """Read-only subject of a session token."""

    id: int
    email: str | None = None


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    password_hash: str
    created_at: datetime
    name: str | None = None

    @property
    def identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, email=self.email)


@dataclass(slots=True, frozen=True)
class UserChanges:
    """Fields to overwrite on a stored user; ``None`` leaves a field untouched."""

    name: str | None = None
    email: str | None = None
    password_hash: str | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.password_hash is None
