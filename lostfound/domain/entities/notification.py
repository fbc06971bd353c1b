"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Notification:
    """Durable record of something the user should learn about."""

    id: int | None
    user_id: int
    title: str
    body: str
    meta: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
