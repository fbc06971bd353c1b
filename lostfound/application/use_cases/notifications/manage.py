"""Use cases for the notification inbox of the current user."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lostfound.application.errors import NotFoundError, PermissionDeniedError
from lostfound.domain.entities import Notification, Page, User
from lostfound.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session, *, current_user: User, page: int, page_size: int
) -> Page[Notification]:
    """Return the user's notifications, newest first."""

    return NotificationRepository(session).list_for_user(
        current_user.id, page=page, page_size=page_size
    )


def _require_owned(
    repository: NotificationRepository, notification_id: int, user: User
) -> Notification:
    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    if notification.user_id != user.id:
        raise PermissionDeniedError("Notification belongs to another user")
    return notification


def mark_notification_read(
    session: Session, *, notification_id: int, current_user: User
) -> None:
    repository = NotificationRepository(session)
    _require_owned(repository, notification_id, current_user)
    repository.mark_as_read(notification_id)


def mark_all_notifications_read(session: Session, *, current_user: User) -> int:
    return NotificationRepository(session).mark_all_as_read(current_user.id)


def delete_notification(
    session: Session, *, notification_id: int, current_user: User
) -> None:
    repository = NotificationRepository(session)
    _require_owned(repository, notification_id, current_user)
    repository.delete(notification_id)


__all__ = [
    "delete_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
