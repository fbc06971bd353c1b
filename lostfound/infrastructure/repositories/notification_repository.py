"""Persistence helpers for notification entities."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lostfound.domain.entities import Notification, Page
from lostfound.infrastructure.models import NotificationModel
from lostfound.utils import ensure_utc_naive, now_utc_naive


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self, user_id: int, *, page: int, page_size: int
    ) -> Page[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.user_id == user_id
        )
        total = query.count()
        models = (
            query.order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return Page(
            total=total,
            page=page,
            page_size=page_size,
            items=[self._to_entity(model) for model in models],
        )

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            title=notification.title,
            body=notification.body,
            meta=dict(notification.meta or {}),
            is_read=notification.is_read,
            created_at=ensure_utc_naive(notification.created_at) or now_utc_naive(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id
        ).update({NotificationModel.is_read: True}, synchronize_session=False)
        self.session.commit()

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.is_read.is_(False))
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def delete(self, notification_id: int) -> None:
        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            body=model.body,
            meta=dict(model.meta or {}),
            is_read=model.is_read,
            created_at=model.created_at,
        )


__all__ = ["NotificationRepository"]
