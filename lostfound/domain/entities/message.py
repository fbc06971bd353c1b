"""Domain entities for private chat messages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    """Private message between two users.

    Each participant can hide the message on their side independently; the
    message is flagged ``is_deleted`` once both sides have hidden it.
    """

    id: int | None
    sender_id: int
    receiver_id: int
    content: str
    created_at: datetime | None = None
    is_read: bool = False
    read_at: datetime | None = None
    sender_deleted: bool = False
    sender_deleted_at: datetime | None = None
    receiver_deleted: bool = False
    receiver_deleted_at: datetime | None = None
    is_deleted: bool = False

    def involves(self, user_id: int) -> bool:
        return user_id in (self.sender_id, self.receiver_id)

    def other_participant(self, user_id: int) -> int:
        return self.receiver_id if self.sender_id == user_id else self.sender_id


@dataclass
class Conversation:
    """Summary of the messages exchanged with one other user."""

    other_user_id: int
    other_user_name: str
    last_message: str
    last_message_at: datetime | None
    unread_count: int


__all__ = ["Conversation", "Message"]
