# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.domain.users.entities import User, UserChanges
from userhub.domain.users.exceptions import UserNotFoundError
from userhub.domain.users.repositories import PasswordHasher, UserRepository
from userhub.shared.errors.base import ValidationError
from userhub.shared.logging import logger


class UpdateUserUseCase:
    def __init__(self, *, users: UserRepository, password_hasher: PasswordHasher) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        user_id: int,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User:
        if email is not None and not email:
            raise ValidationError(code="email_required")
        if password is not None and not password:
            raise ValidationError(code="password_required")

        changes = UserChanges(
            name=name,
            email=email,
            password_hash=self._password_hasher.hash(password) if password else None,
        )
        if changes.is_empty():
            user = self._users.find_by_id(user_id)
            if user is None:
                raise UserNotFoundError(context={"user_id": user_id})
            return user

        updated = self._users.update(user_id, changes)
        provided = {"name": name, "email": email, "password": password}
        changed = sorted(key for key, value in provided.items() if value is not None)
        logger.info(f"users.update: user_id={user_id} fields={changed}")
        return updated


__all__ = ["UpdateUserUseCase"]
