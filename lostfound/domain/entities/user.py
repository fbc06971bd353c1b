"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


from .role import ROLE_ADMIN, Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    google_id: str | None
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_picture: str | None
    role: Role | None
    created_at: datetime | None
    last_login: datetime | None
    is_deleted: bool = False
    deleted_at: datetime | None = None
    deleted_by_user_id: int | None = None

    @property
    def role_name(self) -> str | None:
        return self.role.name if self.role else None

    def has_role(self, name: str) -> bool:
        """Return ``True`` when the user's role name matches ``name``."""

        return self.role is not None and self.role.name.lower() == name.lower()

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(ROLE_ADMIN)

    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def display_name(self) -> str:
        """Return the name shown to other users, falling back to the email."""

        return self.full_name() or self.email or "User"
