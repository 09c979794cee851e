# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.domain.users.entities import User
from userhub.domain.users.repositories import UserRepository


class ListUsersUseCase:
    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def execute(self) -> list[User]:
        return list(self._users.list_all())


__all__ = ["ListUsersUseCase"]
