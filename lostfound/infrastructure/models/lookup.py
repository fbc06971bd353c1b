"""SQLAlchemy models for the category, item type and status tables."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class LookupColumnsMixin:
    """Columns shared by every lookup table."""

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    updated_at = Column(DateTime, nullable=True)


class CategoryModel(LookupColumnsMixin, Base):
    __tablename__ = "category"


class ItemTypeModel(LookupColumnsMixin, Base):
    __tablename__ = "item_type"


class StatusModel(LookupColumnsMixin, Base):
    __tablename__ = "status"


__all__ = ["CategoryModel", "ItemTypeModel", "StatusModel"]
