from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from userhub.domain.users.entities import User


class UserDTO(BaseModel):
    """Public view of a stored user; the password hash never leaves the service."""

    id: int
    name: str | None = None
    email: str
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(id=user.id, name=user.name, email=user.email, created_at=user.created_at)


class UpdateUserRequestDTO(BaseModel):
    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1)


class UserResponseDTO(BaseModel):
    ok: bool = True
    user: UserDTO


class UserListResponseDTO(BaseModel):
    ok: bool = True
    users: list[UserDTO]
