"""Pydantic models describing notification payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import CamelModel, UtcDateTime


class NotificationRead(CamelModel):
    """Representation of a stored notification delivered to the client."""

    id: int
    user_id: int
    title: str
    body: str
    meta_json: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: UtcDateTime | None = None


__all__ = ["NotificationRead"]
