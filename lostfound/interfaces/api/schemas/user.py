"""User schemas."""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel, UtcDateTime


class UserRead(CamelModel):
    id: int
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_picture: str | None
    role_name: str | None
    created_at: UtcDateTime | None
    last_login: UtcDateTime | None


class RoleUpdate(CamelModel):
    role_name: str = Field(default="")


class RoleUpdateResult(CamelModel):
    id: int
    role_name: str


__all__ = ["RoleUpdate", "RoleUpdateResult", "UserRead"]
