from __future__ import annotations

from pydantic import BaseModel, Field

from userhub.interfaces.http.dto.users import UserDTO


class RegisterRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)
    name: str | None = Field(None, max_length=255)


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class RegisterResponseDTO(BaseModel):
    ok: bool = True
    user: UserDTO
    token: str


class LoginResponseDTO(BaseModel):
    ok: bool = True
    id: int
    token: str


class VerifyResponseDTO(BaseModel):
    ok: bool = True
    id: int
    email: str | None = None
