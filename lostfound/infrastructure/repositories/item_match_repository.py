"""Persistence layer for item matches."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from lostfound.domain.entities import ItemMatch
from lostfound.infrastructure.models import ItemMatchModel, ItemModel
from lostfound.utils import now_utc_naive


class ItemMatchRepository:
    """Provide CRUD operations for :class:`ItemMatch` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, match: ItemMatch) -> ItemMatch:
        model = ItemMatchModel(
            lost_item_id=match.lost_item_id,
            found_item_id=match.found_item_id,
            creator_user_id=match.creator_user_id,
            score=match.score,
            created_at=match.created_at or now_utc_naive(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, match_id: int, *, include_deleted: bool = False) -> ItemMatch | None:
        query = self.session.query(ItemMatchModel).filter(ItemMatchModel.id == match_id)
        if not include_deleted:
            query = query.filter(ItemMatchModel.is_deleted.is_(False))
        model = query.first()
        return self._to_entity(model) if model else None

    def list_live(self) -> list[ItemMatch]:
        query = self._live_query()
        return [self._to_entity(model) for model in query.all()]

    def list_for_item(self, item_id: int) -> list[ItemMatch]:
        query = self._live_query().filter(
            or_(
                ItemMatchModel.lost_item_id == item_id,
                ItemMatchModel.found_item_id == item_id,
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def list_visible_to(self, user_id: int) -> list[ItemMatch]:
        """Return live matches ``user_id`` created or owns one of the items of."""

        owned_items = select(ItemModel.id).where(ItemModel.user_id == user_id)
        query = self._live_query().filter(
            or_(
                ItemMatchModel.creator_user_id == user_id,
                ItemMatchModel.lost_item_id.in_(owned_items),
                ItemMatchModel.found_item_id.in_(owned_items),
            )
        )
        return [self._to_entity(model) for model in query.all()]

    def soft_delete(self, match_id: int, *, deleted_by: int) -> ItemMatch:
        model = self.session.get(ItemMatchModel, match_id)
        if model is None:
            msg = f"Item match with id {match_id} not found"
            raise ValueError(msg)
        model.is_deleted = True
        model.deleted_at = now_utc_naive()
        model.deleted_by_user_id = deleted_by
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _live_query(self):
        return (
            self.session.query(ItemMatchModel)
            .filter(ItemMatchModel.is_deleted.is_(False))
            .order_by(ItemMatchModel.created_at.desc(), ItemMatchModel.id.desc())
        )

    @staticmethod
    def _to_entity(model: ItemMatchModel) -> ItemMatch:
        return ItemMatch(
            id=model.id,
            lost_item_id=model.lost_item_id,
            found_item_id=model.found_item_id,
            creator_user_id=model.creator_user_id,
            score=model.score,
            is_deleted=model.is_deleted,
            created_at=model.created_at,
            deleted_at=model.deleted_at,
            deleted_by_user_id=model.deleted_by_user_id,
        )


__all__ = ["ItemMatchRepository"]
