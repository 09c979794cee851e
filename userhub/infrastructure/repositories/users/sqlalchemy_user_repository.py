# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError

from userhub.domain.users.entities import User as DomainUser
from userhub.domain.users.entities import UserChanges
from userhub.domain.users.exceptions import DuplicateEmailError, UserNotFoundError
from userhub.domain.users.repositories import UserRepository
from userhub.infrastructure.db.models import User
from userhub.infrastructure.db.session import session_scope

# Primary keys are signed 64-bit on every supported backend.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _in_id_range(user_id: int) -> bool:
    return _MIN_ID <= user_id <= _MAX_ID


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def is_email_conflict(exc: IntegrityError) -> bool:
    """True when the violated constraint is the unique email index."""
    constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
    if constraint:
        return "email" in constraint.lower()
    message = str(exc.orig).lower()
    return "unique" in message and "email" in message


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_as_utc(row.created_at),
        name=row.name,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        if not _in_id_range(user_id):
            return None
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            if is_email_conflict(exc):
                raise DuplicateEmailError() from exc
            raise

    def update(self, user_id: int, changes: UserChanges) -> DomainUser:
        if not _in_id_range(user_id):
            raise UserNotFoundError(context={"user_id": user_id})
        try:
            with session_scope() as session:
                row = session.get(User, user_id)
                if row is None:
                    raise UserNotFoundError(context={"user_id": user_id})
                if changes.name is not None:
                    row.name = changes.name
                if changes.email is not None:
                    row.email = changes.email
                if changes.password_hash is not None:
                    row.password_hash = changes.password_hash
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            if is_email_conflict(exc):
                raise DuplicateEmailError() from exc
            raise

    def list_all(self) -> Sequence[DomainUser]:
        with session_scope() as session:
            rows = session.query(User).order_by(User.id.asc()).all()
            return [_to_domain(row) for row in rows]
