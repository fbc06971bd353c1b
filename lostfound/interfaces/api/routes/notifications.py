"""Endpoints for the stored notifications of the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.notifications import (
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read as mark_notification_read_uc,
)
from lostfound.domain.entities import Notification, User
from lostfound.infrastructure.database import get_db
from lostfound.interfaces.api.dependencies import get_current_user
from lostfound.interfaces.api.routes_helpers import http_error
from lostfound.interfaces.api.schemas import NotificationRead

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

NOTIFICATIONS_PAGE_SIZE = 50


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        user_id=notification.user_id,
        title=notification.title,
        body=notification.body,
        meta_json=notification.meta or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationRead])
def list_notifications(
    page: int = 1,
    page_size: int = Query(NOTIFICATIONS_PAGE_SIZE, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return one page of the user's notifications, newest first."""

    page = max(page, 1)
    if page_size <= 0:
        page_size = NOTIFICATIONS_PAGE_SIZE
    result = list_notifications_uc(
        db, current_user=current_user, page=page, page_size=page_size
    )
    return [_notification_to_schema(notification) for notification in result.items]


@router.post("/{notification_id}/mark-read", status_code=status.HTTP_204_NO_CONTENT)
def mark_notification_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        mark_notification_read_uc(
            db, notification_id=notification_id, current_user=current_user
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/mark-all-read", status_code=status.HTTP_204_NO_CONTENT)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    mark_all_notifications_read(db, current_user=current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        delete_notification_uc(
            db, notification_id=notification_id, current_user=current_user
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
