"""Schemas describing lost and found items."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import CamelModel, UtcDateTime


class ItemRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    location: str | None = None
    date_lost_found: UtcDateTime | None = None
    created_at: UtcDateTime | None = None
    updated_at: UtcDateTime | None = None
    user_id: int | None = None
    category_id: int | None = None
    type_id: int | None = None
    status_id: int | None = None
    user_name: str | None = None
    category_name: str | None = None
    type_name: str | None = None
    status_name: str | None = None


class ItemCreate(CamelModel):
    name: str = Field(..., max_length=200)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    date_lost_found: datetime | None = None
    category_id: int | None = None
    type_id: int | None = None
    status_id: int | None = None


class ItemUpdate(CamelModel):
    name: str | None = Field(default=None, max_length=200)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)
    date_lost_found: datetime | None = None
    category_id: int | None = None
    type_id: int | None = None
    status_id: int | None = None


class ItemCreated(CamelModel):
    id: int


__all__ = ["ItemCreate", "ItemCreated", "ItemRead", "ItemUpdate"]
