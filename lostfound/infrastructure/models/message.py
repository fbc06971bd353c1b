"""SQLAlchemy model for private chat messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.sql import expression

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class MessageModel(Base):
    """Database representation of a message between two users."""

    __tablename__ = "message"
    __table_args__ = (
        Index("ix_message_receiver_read", "receiver_id", "is_read"),
        Index("ix_message_sender_created", "sender_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    is_read = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    read_at = Column(DateTime, nullable=True)
    sender_deleted = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    sender_deleted_at = Column(DateTime, nullable=True)
    receiver_deleted = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    receiver_deleted_at = Column(DateTime, nullable=True)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=expression.false())


__all__ = ["MessageModel"]
