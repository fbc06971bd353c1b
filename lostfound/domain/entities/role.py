"""Domain entity representing a user role."""

from dataclasses import dataclass
from datetime import datetime

ROLE_USER = "User"
ROLE_ADMIN = "Admin"
ROLE_MODERATOR = "Moderator"


@dataclass
class Role:
    """Core attributes describing a role that can be assigned to a user."""

    id: int
    name: str
    description: str | None = None
    is_active: bool = True
    created_at: datetime | None = None


__all__ = ["Role", "ROLE_ADMIN", "ROLE_MODERATOR", "ROLE_USER"]
