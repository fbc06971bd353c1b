"""Schemas for chat messages and conversations."""

from __future__ import annotations

from .base import CamelModel, UtcDateTime


class MessageSend(CamelModel):
    receiver_id: int
    content: str | None = None


class MessageRead(CamelModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    created_at: UtcDateTime | None = None
    is_read: bool = False
    read_at: UtcDateTime | None = None


class ConversationRead(CamelModel):
    other_user_id: int
    other_user_name: str
    last_message: str
    last_message_at: UtcDateTime | None = None
    unread_count: int


class UnreadCountRead(CamelModel):
    unread: int


__all__ = ["ConversationRead", "MessageRead", "MessageSend", "UnreadCountRead"]
