"""Persistence layer for roles data."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from lostfound.domain.entities import Role
from lostfound.infrastructure.models import RoleModel


class RoleRepository:
    """Provide read access to roles stored in the database."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, role_id: int) -> Role | None:
        model = self.session.query(RoleModel).filter_by(id=role_id).first()
        return self._to_entity(model) if model else None

    def get_by_name(self, name: str) -> Role | None:
        model = (
            self.session.query(RoleModel)
            .filter(func.lower(RoleModel.name) == name.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def list(self) -> list[Role]:
        query = self.session.query(RoleModel).order_by(RoleModel.id)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )


__all__ = ["RoleRepository"]
