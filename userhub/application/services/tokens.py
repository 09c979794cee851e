# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens.

Tokens are compact JWTs signed with a symmetric HMAC algorithm. The claims
carry the subject id, the subject email and an expiry in epoch seconds.
Nothing is stored server side; expiry is the only way a token ends.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from userhub.domain.auth.exceptions import (
    InvalidSignatureError,
    MalformedTokenError,
    MissingSigningSecretError,
    MissingSubjectError,
    TokenExpiredError,
    TokenRejectedError,
)
from userhub.domain.users.entities import UserIdentity
from userhub.domain.users.repositories import TokenIssuer, TokenVerifier
from userhub.shared.config import TokenConfig
from userhub.shared.logging import logger

USER_ID_CLAIM = "user_id"
EMAIL_CLAIM = "email"
EXPIRY_CLAIM = "exp"

DEFAULT_TTL = timedelta(hours=24)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, frozen=True)
class TokenSigningConfig:
    secret: str = field(repr=False)
    algorithm: str = "HS256"
    ttl: timedelta = DEFAULT_TTL
    scheme: str = "Bearer"

    def __post_init__(self) -> None:
        if not self.secret:
            raise MissingSigningSecretError()

    @classmethod
    def from_token_config(cls, config: TokenConfig) -> TokenSigningConfig:
        return cls(
            secret=config.secret,
            algorithm=config.algorithm,
            ttl=timedelta(seconds=config.ttl_seconds),
            scheme=config.scheme,
        )


def strip_scheme(header_value: str | None, scheme: str) -> str:
    """Return the token body of ``"<scheme> <token>"``.

    The length is checked before slicing, so short or empty input is a
    ``MalformedTokenError`` rather than an indexing fault.
    """
    prefix = f"{scheme} "
    if not header_value or len(header_value) <= len(prefix):
        raise MalformedTokenError()
    if header_value[: len(prefix)].lower() != prefix.lower():
        raise MalformedTokenError()
    token = header_value[len(prefix) :].strip()
    if not token:
        raise MalformedTokenError()
    return token


class JwtTokenIssuer(TokenIssuer):
    def __init__(self, config: TokenSigningConfig, *, clock: Clock = utc_now) -> None:
        self._config = config
        self._clock = clock

    def issue(self, identity: UserIdentity) -> str:
        expires_at = self._clock() + self._config.ttl
        claims: dict[str, Any] = {
            USER_ID_CLAIM: identity.id,
            EXPIRY_CLAIM: int(expires_at.timestamp()),
        }
        if identity.email is not None:
            claims[EMAIL_CLAIM] = identity.email
        token = jwt.encode(claims, self._config.secret, algorithm=self._config.algorithm)
        logger.debug(f"token.issue: user_id={identity.id} exp={expires_at.isoformat()}")
        return token


class JwtTokenVerifier(TokenVerifier):
    def __init__(self, config: TokenSigningConfig, *, clock: Clock = utc_now) -> None:
        self._config = config
        self._clock = clock

    def validate_header(self, header_value: str | None) -> UserIdentity:
        return self.validate(strip_scheme(header_value, self._config.scheme))

    def validate(self, token: str) -> UserIdentity:
        if not token or not token.strip():
            raise MalformedTokenError()
        claims = self._check_signature(token)
        return self._check_claims(claims)

    def _check_signature(self, token: str) -> dict[str, Any]:
        try:
            # Expiry is checked against our own clock in _check_claims.
            return jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"verify_exp": False},
            )
        except (jwt.InvalidSignatureError, jwt.InvalidAlgorithmError) as exc:
            logger.debug(f"token.validate: rejected signature ({type(exc).__name__})")
            raise InvalidSignatureError() from exc
        except jwt.DecodeError as exc:
            logger.debug("token.validate: rejected undecodable token")
            raise MalformedTokenError() from exc
        except jwt.InvalidTokenError as exc:
            logger.debug(f"token.validate: rejected token ({type(exc).__name__})")
            raise TokenRejectedError() from exc

    def _check_claims(self, claims: dict[str, Any]) -> UserIdentity:
        user_id = claims.get(USER_ID_CLAIM)
        if user_id is None:
            raise MissingSubjectError()
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise MalformedTokenError()

        expires_at = claims.get(EXPIRY_CLAIM)
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            raise TokenExpiredError()
        if expires_at <= self._clock().timestamp():
            raise TokenExpiredError()

        email = claims.get(EMAIL_CLAIM)
        return UserIdentity(id=user_id, email=email if isinstance(email, str) else None)


__all__ = [
    "JwtTokenIssuer",
    "JwtTokenVerifier",
    "TokenSigningConfig",
    "strip_scheme",
    "utc_now",
]
