# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userhub.domain.users.entities import UserIdentity
from userhub.domain.users.repositories import TokenVerifier


class VerifyTokenUseCase:
    """Validation probe: reports the token subject, authorizes nothing."""

    def __init__(self, *, verifier: TokenVerifier) -> None:
        self._verifier = verifier

    def execute(self, authorization: str | None) -> UserIdentity:
        return self._verifier.validate_header(authorization)


__all__ = ["VerifyTokenUseCase"]
