"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from lostfound.domain.entities import Page, Role, User
from lostfound.infrastructure.models import RoleModel, UserModel
from lostfound.utils import now_utc_naive


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_paged(
        self,
        *,
        page: int,
        page_size: int,
        search: str | None = None,
        deleted: bool = False,
    ) -> Page[User]:
        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.is_deleted.is_(deleted))
        )
        term = (search or "").strip().lower()
        if term:
            pattern = f"%{term}%"
            query = query.filter(
                or_(
                    func.lower(UserModel.email).like(pattern),
                    func.lower(UserModel.first_name).like(pattern),
                    func.lower(UserModel.last_name).like(pattern),
                )
            )
        total = query.count()
        if deleted:
            query = query.order_by(UserModel.deleted_at.asc(), UserModel.id.asc())
        else:
            query = query.order_by(UserModel.id)
        models = query.offset((page - 1) * page_size).limit(page_size).all()
        return Page(
            total=total,
            page=page,
            page_size=page_size,
            items=[self._to_entity(model) for model in models],
        )

    def get(self, user_id: int, *, include_deleted: bool = False) -> User | None:
        model = self._get_model(include_deleted=include_deleted, id=user_id)
        return self._to_entity(model) if model else None

    def get_by_google_id(self, google_id: str) -> User | None:
        model = self._get_model(google_id=google_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.is_deleted.is_(False))
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        model.created_at = user.created_at or now_utc_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(include_deleted=True, id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def soft_delete(self, user_id: int, *, deleted_by: int | None) -> None:
        model = self._get_model(include_deleted=True, id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        if model.is_deleted:
            return
        model.is_deleted = True
        model.deleted_at = now_utc_naive()
        model.deleted_by_user_id = deleted_by
        self.session.add(model)
        self.session.commit()

    def restore(self, user_id: int) -> None:
        model = self._get_model(include_deleted=True, id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        model.is_deleted = False
        model.deleted_at = None
        model.deleted_by_user_id = None
        self.session.add(model)
        self.session.commit()

    def get_map_by_ids(
        self, user_ids: Sequence[int], *, include_deleted: bool = True
    ) -> dict[int, User]:
        if not user_ids:
            return {}

        unique_ids = {int(user_id) for user_id in user_ids}
        query = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id.in_(unique_ids))
        )
        if not include_deleted:
            query = query.filter(UserModel.is_deleted.is_(False))
        return {model.id: self._to_entity(model) for model in query.all()}

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            google_id=model.google_id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            profile_picture=model.profile_picture,
            role=UserRepository._role_to_entity(model.role),
            created_at=model.created_at,
            last_login=model.last_login,
            is_deleted=model.is_deleted,
            deleted_at=model.deleted_at,
            deleted_by_user_id=model.deleted_by_user_id,
        )

    def _get_model(self, include_deleted: bool = False, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        if not include_deleted:
            query = query.filter(UserModel.is_deleted.is_(False))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.google_id = user.google_id
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.profile_picture = user.profile_picture
        model.role_id = user.role.id if user.role else None
        model.last_login = user.last_login
        model.is_deleted = user.is_deleted
        model.deleted_at = user.deleted_at
        model.deleted_by_user_id = user.deleted_by_user_id

    @staticmethod
    def _role_to_entity(model_role: RoleModel | None) -> Role | None:
        if model_role is None:
            return None
        return Role(
            id=model_role.id,
            name=model_role.name,
            description=model_role.description,
            is_active=model_role.is_active,
            created_at=model_role.created_at,
        )


__all__ = ["UserRepository"]
