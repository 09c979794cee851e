"""Password hashing strategies."""

from __future__ import annotations

from string import hexdigits

from werkzeug.security import check_password_hash, generate_password_hash

from userhub.domain.auth.exceptions import HashingFailureError, InvalidHashFormatError
from userhub.domain.users.repositories import PasswordHasher
from userhub.shared.logging import logger

_KNOWN_METHODS = frozenset({"scrypt", "pbkdf2"})


def _check_hash_format(hashed: str) -> None:
    # werkzeug layout: "<method>[:params]$<salt>$<hex digest>"
    if not isinstance(hashed, str) or hashed.count("$") != 2:
        raise InvalidHashFormatError()
    method, salt, digest = hashed.split("$", 2)
    if method.split(":", 1)[0] not in _KNOWN_METHODS:
        raise InvalidHashFormatError()
    if not salt or not digest or any(ch not in hexdigits for ch in digest):
        raise InvalidHashFormatError()


class WerkzeugPasswordHasher(PasswordHasher):
    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password, method=self._method))
        except (ValueError, TypeError, MemoryError) as exc:
            logger.error(f"password.hash: {self._method} failed ({type(exc).__name__})")
            raise HashingFailureError() from exc

    def verify(self, password: str, hashed: str) -> bool:
        _check_hash_format(hashed)
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError) as exc:
            logger.error("password.verify: stored hash could not be parsed")
            raise InvalidHashFormatError() from exc
