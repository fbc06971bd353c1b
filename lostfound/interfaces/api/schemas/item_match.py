"""Schemas for item match suggestions."""

from __future__ import annotations

from .base import CamelModel, UtcDateTime


class ItemMatchCreate(CamelModel):
    lost_item_id: int
    found_item_id: int
    score: int = 0


class ItemMatchRead(CamelModel):
    id: int
    lost_item_id: int
    found_item_id: int
    creator_user_id: int
    score: int
    is_deleted: bool = False
    created_at: UtcDateTime | None = None


__all__ = ["ItemMatchCreate", "ItemMatchRead"]
