"""SQLAlchemy model for item matches."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import expression

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class ItemMatchModel(Base):
    """Database representation of a lost/found item pairing."""

    __tablename__ = "item_match"

    id = Column(Integer, primary_key=True, index=True)
    lost_item_id = Column(
        Integer, ForeignKey("item.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    found_item_id = Column(
        Integer, ForeignKey("item.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    creator_user_id = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False, default=0)
    is_deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    deleted_at = Column(DateTime, nullable=True)
    deleted_by_user_id = Column(Integer, nullable=True)


__all__ = ["ItemMatchModel"]
