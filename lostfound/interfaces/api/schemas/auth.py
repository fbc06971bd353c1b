"""Schemas for the development token endpoint."""

from __future__ import annotations

from .base import CamelModel


class DevTokenRequest(CamelModel):
    google_id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class DevTokenUser(CamelModel):
    id: int
    email: str | None
    first_name: str | None
    last_name: str | None
    avatar_url: str | None
    role_name: str | None


class DevTokenResponse(CamelModel):
    token: str
    user: DevTokenUser


__all__ = ["DevTokenRequest", "DevTokenResponse", "DevTokenUser"]
