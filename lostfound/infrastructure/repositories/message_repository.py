"""Persistence layer for private chat messages."""

from __future__ import annotations

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session

from lostfound.domain.entities import Message
from lostfound.infrastructure.models import MessageModel
from lostfound.utils import now_utc_naive


class MessageRepository:
    """Provide CRUD operations for :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, message: Message, *, commit: bool = True) -> Message:
        """Insert ``message``; with ``commit=False`` only flush to obtain its id."""

        model = MessageModel(
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            content=message.content,
            created_at=message.created_at or now_utc_naive(),
            is_read=False,
        )
        self.session.add(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        return self._to_entity(model) if model else None

    def list_history(
        self, user_id: int, other_user_id: int, *, page: int, page_size: int
    ) -> list[Message]:
        """Return one page of the conversation, newest page first, oldest first inside."""

        models = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.receiver_id == other_user_id,
                        MessageModel.sender_deleted.is_(False),
                    ),
                    and_(
                        MessageModel.receiver_id == user_id,
                        MessageModel.sender_id == other_user_id,
                        MessageModel.receiver_deleted.is_(False),
                    ),
                )
            )
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return [self._to_entity(model) for model in reversed(models)]

    def list_visible_to(self, user_id: int) -> list[Message]:
        """Return every message ``user_id`` has not hidden on their side."""

        models = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.sender_deleted.is_(False),
                    ),
                    and_(
                        MessageModel.receiver_id == user_id,
                        MessageModel.receiver_deleted.is_(False),
                    ),
                )
            )
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
            .all()
        )
        return [self._to_entity(model) for model in models]

    def count_unread(self, user_id: int) -> int:
        return (
            self.session.query(func.count(MessageModel.id))
            .filter(MessageModel.receiver_id == user_id)
            .filter(MessageModel.is_read.is_(False))
            .filter(MessageModel.receiver_deleted.is_(False))
            .scalar()
            or 0
        )

    def mark_read(self, message_id: int) -> Message:
        model = self._require_model(message_id)
        model.is_read = True
        model.read_at = now_utc_naive()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_deleted_for(self, message_id: int, user_id: int, deleted: bool) -> Message:
        """Hide or unhide ``message_id`` on ``user_id``'s side."""

        model = self._require_model(message_id)
        self._apply_side_deletion(model, user_id, deleted, now_utc_naive())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_conversation_for(self, user_id: int, other_user_id: int) -> int:
        """Hide every message between the two users on ``user_id``'s side."""

        models = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    and_(
                        MessageModel.sender_id == user_id,
                        MessageModel.receiver_id == other_user_id,
                    ),
                    and_(
                        MessageModel.receiver_id == user_id,
                        MessageModel.sender_id == other_user_id,
                    ),
                )
            )
            .all()
        )
        now = now_utc_naive()
        for model in models:
            self._apply_side_deletion(model, user_id, True, now)
        self.session.commit()
        return len(models)

    @staticmethod
    def _apply_side_deletion(model: MessageModel, user_id: int, deleted: bool, now) -> None:
        if model.sender_id == user_id:
            model.sender_deleted = deleted
            model.sender_deleted_at = now if deleted else None
        if model.receiver_id == user_id:
            model.receiver_deleted = deleted
            model.receiver_deleted_at = now if deleted else None
        model.is_deleted = bool(model.sender_deleted and model.receiver_deleted)

    def _require_model(self, message_id: int) -> MessageModel:
        model = self.session.get(MessageModel, message_id)
        if model is None:
            msg = f"Message with id {message_id} not found"
            raise ValueError(msg)
        return model

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            content=model.content,
            created_at=model.created_at,
            is_read=model.is_read,
            read_at=model.read_at,
            sender_deleted=model.sender_deleted,
            sender_deleted_at=model.sender_deleted_at,
            receiver_deleted=model.receiver_deleted,
            receiver_deleted_at=model.receiver_deleted_at,
            is_deleted=model.is_deleted,
        )


__all__ = ["MessageRepository"]
