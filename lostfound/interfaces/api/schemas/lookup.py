"""Schemas shared by the category, item type and status endpoints."""

from __future__ import annotations

from pydantic import Field

from .base import CamelModel, UtcDateTime


class LookupRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: UtcDateTime | None = None
    updated_at: UtcDateTime | None = None


class LookupWrite(CamelModel):
    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=255)


class LookupUsageRead(CamelModel):
    id: int
    item_count: int


__all__ = ["LookupRead", "LookupUsageRead", "LookupWrite"]
