"""Domain entity linking a lost item with a found item."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ItemMatch:
    """Suggested pairing of a lost item and a found item."""

    id: int | None
    lost_item_id: int
    found_item_id: int
    creator_user_id: int
    score: int = 0
    is_deleted: bool = False
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    deleted_by_user_id: int | None = None


__all__ = ["ItemMatch"]
