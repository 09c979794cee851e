from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

import pytest

from userhub.application.services.tokens import (JwtTokenIssuer,
                                                 JwtTokenVerifier,
                                                 TokenSigningConfig)
from userhub.application.use_cases.users.get_user import GetUserUseCase
from userhub.application.use_cases.users.list_users import ListUsersUseCase
from userhub.application.use_cases.users.login_user import LoginUserUseCase
from userhub.application.use_cases.users.register_user import RegisterUserUseCase
from userhub.application.use_cases.users.update_user import UpdateUserUseCase
from userhub.application.use_cases.users.verify_token import VerifyTokenUseCase
from userhub.domain.auth.exceptions import MalformedTokenError
from userhub.domain.users.entities import User, UserChanges
from userhub.domain.users.exceptions import (DuplicateEmailError,
                                             InvalidCredentialsError,
                                             UserNotFoundError)
from userhub.domain.users.repositories import PasswordHasher, UserRepository
from userhub.shared.errors.base import ValidationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if self.find_by_email(user.email) is not None:
            raise DuplicateEmailError()
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def update(self, user_id: int, changes: UserChanges) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError()
        if changes.email is not None:
            other = self.find_by_email(changes.email)
            if other is not None and other.id != user_id:
                raise DuplicateEmailError()
        updated = replace(
            user,
            name=changes.name if changes.name is not None else user.name,
            email=changes.email if changes.email is not None else user.email,
            password_hash=changes.password_hash or user.password_hash,
        )
        self._users[user_id] = updated
        return updated

    def list_all(self) -> Sequence[User]:
        return [self._users[key] for key in sorted(self._users)]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def signing() -> TokenSigningConfig:
    return TokenSigningConfig(secret="use-case-secret-0123456789abcdefghij")


@pytest.fixture()
def register(users: InMemoryUserRepository, signing: TokenSigningConfig) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users=users, tokens=JwtTokenIssuer(signing), password_hasher=DeterministicHasher()
    )


@pytest.fixture()
def login(users: InMemoryUserRepository, signing: TokenSigningConfig) -> LoginUserUseCase:
    return LoginUserUseCase(
        users=users, tokens=JwtTokenIssuer(signing), password_hasher=DeterministicHasher()
    )


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository, signing: TokenSigningConfig
) -> None:
    user, token = register.execute("a@x.com", "secret1", "Alice")

    assert user.id == 1
    assert user.name == "Alice"
    assert user.password_hash == "hashed:secret1"
    assert users.find_by_email("a@x.com") == user
    assert JwtTokenVerifier(signing).validate(token).id == user.id


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("a@x.com", "secret1")

    with pytest.raises(DuplicateEmailError):
        register.execute("a@x.com", "other")


@pytest.mark.parametrize(("email", "password"), [("", "secret1"), ("a@x.com", ""), ("", "")])
def test_register_user_requires_email_and_password(
    register: RegisterUserUseCase, users: InMemoryUserRepository, email: str, password: str
) -> None:
    with pytest.raises(ValidationError):
        register.execute(email, password)

    assert users.list_all() == []


def test_login_user_success(
    register: RegisterUserUseCase, login: LoginUserUseCase, signing: TokenSigningConfig
) -> None:
    registered, _ = register.execute("a@x.com", "secret1")

    user, token = login.execute("a@x.com", "secret1")

    assert user.id == registered.id
    identity = JwtTokenVerifier(signing).validate(token)
    assert identity.id == registered.id
    assert identity.email == "a@x.com"


def test_login_user_invalid_credentials(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("a@x.com", "secret1")

    with pytest.raises(InvalidCredentialsError):
        login.execute("a@x.com", "wrong")


def test_login_unknown_email(login: LoginUserUseCase) -> None:
    with pytest.raises(UserNotFoundError):
        login.execute("nobody@x.com", "secret1")


def test_login_requires_email_and_password(login: LoginUserUseCase) -> None:
    with pytest.raises(ValidationError):
        login.execute("a@x.com", "")


def test_get_and_list_users(register: RegisterUserUseCase, users: InMemoryUserRepository) -> None:
    first, _ = register.execute("a@x.com", "secret1")
    second, _ = register.execute("b@x.com", "secret2")

    assert GetUserUseCase(users).execute(second.id) == second
    assert ListUsersUseCase(users).execute() == [first, second]
    with pytest.raises(UserNotFoundError):
        GetUserUseCase(users).execute(99)


def test_update_user_rehashes_password(
    register: RegisterUserUseCase, login: LoginUserUseCase, users: InMemoryUserRepository
) -> None:
    user, _ = register.execute("a@x.com", "secret1")
    update = UpdateUserUseCase(users=users, password_hasher=DeterministicHasher())

    updated = update.execute(user.id, name="Alice", password="secret2")

    assert updated.name == "Alice"
    assert updated.password_hash == "hashed:secret2"
    assert login.execute("a@x.com", "secret2")[0].id == user.id
    with pytest.raises(InvalidCredentialsError):
        login.execute("a@x.com", "secret1")


def test_update_user_without_changes_returns_record(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user, _ = register.execute("a@x.com", "secret1")
    update = UpdateUserUseCase(users=users, password_hasher=DeterministicHasher())

    assert update.execute(user.id) == user
    with pytest.raises(UserNotFoundError):
        update.execute(42)


def test_update_user_rejects_empty_values_and_conflicts(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user, _ = register.execute("a@x.com", "secret1")
    register.execute("b@x.com", "secret2")
    update = UpdateUserUseCase(users=users, password_hasher=DeterministicHasher())

    with pytest.raises(ValidationError):
        update.execute(user.id, email="")
    with pytest.raises(ValidationError):
        update.execute(user.id, password="")
    with pytest.raises(DuplicateEmailError):
        update.execute(user.id, email="b@x.com")
    with pytest.raises(UserNotFoundError):
        update.execute(42, name="ghost")


def test_verify_token_use_case(register: RegisterUserUseCase, signing: TokenSigningConfig) -> None:
    user, token = register.execute("a@x.com", "secret1")
    verify = VerifyTokenUseCase(verifier=JwtTokenVerifier(signing))

    assert verify.execute(f"Bearer {token}").id == user.id
    with pytest.raises(MalformedTokenError):
        verify.execute("Bear")
