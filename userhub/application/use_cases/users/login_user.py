# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.domain.users.entities import User
from userhub.domain.users.exceptions import InvalidCredentialsError, UserNotFoundError
from userhub.domain.users.repositories import PasswordHasher, TokenIssuer, UserRepository
from userhub.shared.errors.base import ValidationError
from userhub.shared.logging import logger


class LoginUserUseCase:
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

    def execute(self, email: str, password: str) -> tuple[User, str]:
        if not email or not password:
            raise ValidationError(code="email_and_password_required")

        user = self._users.find_by_email(email)
        if user is None:
            raise UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            logger.warning(f"users.login: password mismatch user_id={user.id}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.identity)
        return user, token
