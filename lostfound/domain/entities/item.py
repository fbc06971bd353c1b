"""Domain entity representing a reported lost or found item."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Item:
    """An object somebody lost or found."""

    id: int | None
    user_id: int | None
    category_id: int | None
    status_id: int | None
    type_id: int | None
    name: str
    description: str | None = None
    location: str | None = None
    date_lost_found: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    is_deleted: bool = False
    deleted_at: datetime | None = None
    deleted_by_user_id: int | None = None
    user_name: str | None = None
    category_name: str | None = None
    type_name: str | None = None
    status_name: str | None = None


__all__ = ["Item"]
