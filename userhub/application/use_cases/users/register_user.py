# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from userhub.domain.users.entities import User
from userhub.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userhub.shared.errors.base import ValidationError
from userhub.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str, name: str | None = None) -> tuple[User, str]:
        if not email or not password:
            raise ValidationError(code="email_and_password_required")
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
            name=name,
        )
        # Email uniqueness is enforced by the store; add() raises DuplicateEmailError.
        persisted = self._users.add(user)
        token = self._tokens.issue(persisted.identity)
        logger.info(f"users.register: created user_id={persisted.id}")
        return persisted, token
