# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import User, UserChanges, UserIdentity

__all__ = ["User", "UserChanges", "UserIdentity"]
