# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import User, UserChanges, UserIdentity


class UserRepository(Protocol):
    """Store contract.

    ``add`` raises ``DuplicateEmailError`` on a unique-email conflict and
    ``update`` raises ``UserNotFoundError`` for an unknown id.
    """

    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...
    def update(self, user_id: int, changes: UserChanges) -> User: ...
    def list_all(self) -> Sequence[User]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, identity: UserIdentity) -> str: ...


class TokenVerifier(Protocol):
    def validate(self, token: str) -> UserIdentity: ...
    def validate_header(self, header_value: str | None) -> UserIdentity: ...
