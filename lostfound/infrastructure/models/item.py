"""SQLAlchemy model for reported items."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class ItemModel(Base):
    """Database representation of a lost or found item."""

    __tablename__ = "item"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("user.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    category_id = Column(
        Integer, ForeignKey("category.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    status_id = Column(
        Integer, ForeignKey("status.id", ondelete="RESTRICT"), nullable=True
    )
    type_id = Column(
        Integer, ForeignKey("item_type.id", ondelete="RESTRICT"), nullable=True
    )
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)
    date_lost_found = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True)
    is_deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    deleted_at = Column(DateTime, nullable=True, index=True)
    deleted_by_user_id = Column(Integer, nullable=True)

    user = relationship("UserModel", lazy="joined")
    category = relationship("CategoryModel", lazy="joined")
    status = relationship("StatusModel", lazy="joined")
    type = relationship("ItemTypeModel", lazy="joined")


__all__ = ["ItemModel"]
