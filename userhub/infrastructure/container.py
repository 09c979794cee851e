# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from userhub.application.services.password_hashing import WerkzeugPasswordHasher
from userhub.application.services.tokens import (JwtTokenIssuer,
                                                 JwtTokenVerifier,
                                                 TokenSigningConfig)
from userhub.application.use_cases.users.get_user import GetUserUseCase
from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.register_user import \
    RegisterUserUseCase
from userhub.application.use_cases.users.update_user import UpdateUserUseCase
from userhub.application.use_cases.users.verify_token import \
    VerifyTokenUseCase
from userhub.infrastructure.health import check_database
from userhub.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from userhub.interfaces.http.controllers.auth_controller import AuthController
from userhub.interfaces.http.controllers.misc_controller import MiscController
from userhub.interfaces.http.controllers.users_controller import \
    UsersController
from userhub.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @cached_property
    def token_signing_config(self) -> TokenSigningConfig:
        return TokenSigningConfig.from_token_config(self._config.token)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self._config.password.hash_method)

    @cached_property
    def token_issuer(self) -> JwtTokenIssuer:
        return JwtTokenIssuer(self.token_signing_config)

    @cached_property
    def token_verifier(self) -> JwtTokenVerifier:
        return JwtTokenVerifier(self.token_signing_config)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def verify_token_use_case(self) -> VerifyTokenUseCase:
        return VerifyTokenUseCase(verifier=self.token_verifier)

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(self.user_repository)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(self.user_repository)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            verify_use_case=self.verify_token_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            get_user=self.get_user_use_case,
            list_users=self.list_users_use_case,
            update_user=self.update_user_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(check_database=check_database)
