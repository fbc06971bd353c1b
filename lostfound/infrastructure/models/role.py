"""SQLAlchemy model for user roles."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class RoleModel(Base):
    """Database representation of the system roles."""

    __tablename__ = "role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)


__all__ = ["RoleModel"]
