"""Domain entities for the admin-managed lookup tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class LookupValue:
    """Named value items are classified by (category, type or status)."""

    id: int | None
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Category(LookupValue):
    """Kind of object, e.g. *Electronics* or *Documents*."""


@dataclass
class ItemType(LookupValue):
    """Whether an item was *Lost* or *Found*."""


@dataclass
class Status(LookupValue):
    """Workflow state of an item report."""


__all__ = ["Category", "ItemType", "LookupValue", "Status"]
