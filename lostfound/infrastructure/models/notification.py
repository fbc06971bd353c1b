"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.sql import expression

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    meta = Column(JSON, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False, server_default=expression.false())
    created_at = Column(DateTime(), nullable=False, default=now_utc_naive)


__all__ = ["NotificationModel"]
