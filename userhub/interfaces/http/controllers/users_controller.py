# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from userhub.application.use_cases.users.get_user import GetUserUseCase
from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.application.use_cases.users.update_user import UpdateUserUseCase
from userhub.interfaces.http.dto.users import (UpdateUserRequestDTO, UserDTO,
                                               UserListResponseDTO,
                                               UserResponseDTO)
from userhub.interfaces.http.request_body import json_body
from userhub.shared.errors.validation import raise_validation_error


class UsersController:
    def __init__(
        self,
        *,
        get_user: GetUserUseCase,
        list_users: ListUsersUseCase,
        update_user: UpdateUserUseCase,
    ) -> None:
        self._get_user = get_user
        self._list_users = list_users
        self._update_user = update_user

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/v1")
        bp.add_url_rule("/users", view_func=self.list_users, methods=["GET"])
        bp.add_url_rule("/users/<int:user_id>", view_func=self.get_user, methods=["GET"])
        bp.add_url_rule("/users/<int:user_id>", view_func=self.update_user, methods=["PATCH"])
        return bp

    def list_users(self) -> tuple[Response, int]:
        users = self._list_users.execute()
        payload = UserListResponseDTO(users=[UserDTO.from_entity(user) for user in users])
        return jsonify(payload.model_dump(mode="json")), 200

    def get_user(self, user_id: int) -> tuple[Response, int]:
        user = self._get_user.execute(user_id)
        payload = UserResponseDTO(user=UserDTO.from_entity(user))
        return jsonify(payload.model_dump(mode="json")), 200

    def update_user(self, user_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateUserRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._update_user.execute(
            user_id, name=dto.name, email=dto.email, password=dto.password
        )
        payload = UserResponseDTO(user=UserDTO.from_entity(user))
        return jsonify(payload.model_dump(mode="json")), 200
