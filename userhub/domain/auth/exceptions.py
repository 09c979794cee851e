# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Failures raised by the password hasher and the session-token core."""

from __future__ import annotations

from http import HTTPStatus

from userhub.shared.errors.base import DomainError, InfrastructureError


class HashingFailureError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="hashing_failure")


class InvalidHashFormatError(InfrastructureError):
    """The stored password hash is corrupt, as opposed to a wrong password."""

    def __init__(self) -> None:
        super().__init__(code="invalid_hash_format")


class MissingSigningSecretError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__(code="missing_signing_secret")


class TokenRejectedError(DomainError):
    code = "token_rejected"
    status = HTTPStatus.UNAUTHORIZED


class MalformedTokenError(TokenRejectedError):
    code = "malformed_token"


class InvalidSignatureError(TokenRejectedError):
    code = "invalid_signature"


class TokenExpiredError(TokenRejectedError):
    code = "token_expired"


class MissingSubjectError(TokenRejectedError):
    code = "missing_subject"
