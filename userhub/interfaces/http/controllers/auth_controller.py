# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.register_user import RegisterUserUseCase
from userhub.application.use_cases.users.verify_token import VerifyTokenUseCase
from userhub.interfaces.http.dto.auth import (LoginRequestDTO, LoginResponseDTO,
                                              RegisterRequestDTO,
                                              RegisterResponseDTO,
                                              VerifyResponseDTO)
from userhub.interfaces.http.dto.users import UserDTO
from userhub.interfaces.http.request_body import json_body
from userhub.shared.errors.validation import raise_validation_error
from userhub.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        verify_use_case: VerifyTokenUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._verify_use_case = verify_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.email, dto.password, dto.name)

        payload = RegisterResponseDTO(user=UserDTO.from_entity(user), token=token)
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload.model_dump(mode="json")), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.email, dto.password)

        payload = LoginResponseDTO(id=user.id, token=token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload.model_dump(mode="json")), 200

    def verify(self) -> tuple[Response, int]:
        identity = self._verify_use_case.execute(request.headers.get("Authorization"))
        g.user_id = identity.id

        payload = VerifyResponseDTO(id=identity.id, email=identity.email)
        logger.debug(f"auth.verify: ok user_id={identity.id}")
        return jsonify(payload.model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/v1")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/verify", view_func=self.verify, methods=["GET"])
        return bp
