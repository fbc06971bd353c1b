"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import expression
from sqlalchemy.orm import relationship

from lostfound.infrastructure.database import Base
from lostfound.utils import now_utc_naive


class UserModel(Base):
    """Database representation of the system user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    google_id = Column(String(255), nullable=True, index=True)
    email = Column(String(255), nullable=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_picture = Column(String(1024), nullable=True)
    role_id = Column(Integer, ForeignKey("role.id", ondelete="RESTRICT"), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)
    last_login = Column(DateTime, nullable=True)
    is_deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    deleted_at = Column(DateTime, nullable=True, index=True)
    deleted_by_user_id = Column(Integer, nullable=True)

    role = relationship("RoleModel", lazy="joined")


__all__ = ["UserModel"]
