"""Routes for private chat messages."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from lostfound.application.use_cases.messages import (
    count_unread,
    delete_conversation as delete_conversation_uc,
    get_history,
    list_conversations as list_conversations_uc,
    mark_message_read as mark_message_read_uc,
    send_message as send_message_uc,
    set_message_deleted,
)
from lostfound.domain.entities import Message, User
from lostfound.infrastructure.database import get_db
from lostfound.infrastructure.realtime import NotificationDispatcher
from lostfound.interfaces.api.dependencies import (
    get_current_user,
    get_notification_dispatcher,
)
from lostfound.interfaces.api.routes_helpers import http_error
from lostfound.interfaces.api.schemas import (
    ConversationRead,
    MessageRead,
    MessageSend,
    UnreadCountRead,
)

router = APIRouter(prefix="/api/messages", tags=["messages"])

HISTORY_PAGE_SIZE = 100


def _to_read_model(message: Message) -> MessageRead:
    return MessageRead(
        id=message.id,
        sender_id=message.sender_id,
        receiver_id=message.receiver_id,
        content=message.content,
        created_at=message.created_at,
        is_read=message.is_read,
        read_at=message.read_at,
    )


@router.get("/history/{other_user_id}", response_model=list[MessageRead])
def read_history(
    other_user_id: int,
    page: int = 1,
    page_size: int = Query(HISTORY_PAGE_SIZE, alias="pageSize"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return one page of the conversation, oldest message first.

    Page 1 holds the most recent messages.
    """

    page = max(page, 1)
    if page_size <= 0:
        page_size = HISTORY_PAGE_SIZE
    messages = get_history(
        db,
        current_user=current_user,
        other_user_id=other_user_id,
        page=page,
        page_size=page_size,
    )
    return [_to_read_model(message) for message in messages]


@router.post("/send", response_model=MessageRead)
def send_message(
    message_in: MessageSend,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Store a message and push it to both participants."""

    try:
        message = send_message_uc(
            db,
            dispatcher,
            sender=current_user,
            receiver_id=message_in.receiver_id,
            content=message_in.content,
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return _to_read_model(message)


@router.post("/{message_id}/soft-delete", status_code=status.HTTP_204_NO_CONTENT)
def soft_delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        set_message_deleted(
            db, message_id=message_id, current_user=current_user, deleted=True
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{message_id}/undo-delete", status_code=status.HTTP_204_NO_CONTENT)
def undo_delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        set_message_deleted(
            db, message_id=message_id, current_user=current_user, deleted=False
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/conversations", response_model=list[ConversationRead])
def list_conversations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    conversations = list_conversations_uc(db, current_user=current_user)
    return [
        ConversationRead(
            other_user_id=conversation.other_user_id,
            other_user_name=conversation.other_user_name,
            last_message=conversation.last_message,
            last_message_at=conversation.last_message_at,
            unread_count=conversation.unread_count,
        )
        for conversation in conversations
    ]


@router.post(
    "/conversations/{other_user_id}/delete", status_code=status.HTTP_204_NO_CONTENT
)
def delete_conversation(
    other_user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """Hide the whole conversation on the caller's side and tell the peer."""

    delete_conversation_uc(
        db, dispatcher, current_user=current_user, other_user_id=other_user_id
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{message_id}/mark-read", status_code=status.HTTP_204_NO_CONTENT)
def mark_message_read(
    message_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    try:
        mark_message_read_uc(
            db, dispatcher, message_id=message_id, current_user=current_user
        )
    except ValueError as exc:
        raise http_error(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/unread-count", response_model=UnreadCountRead)
def read_unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return UnreadCountRead(unread=count_unread(db, current_user=current_user))
