"""Websocket hub pushing chat and notification events to signed-in users."""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from anyio import to_thread
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from lostfound.domain.entities import User
from lostfound.infrastructure.database import SessionLocal
from lostfound.infrastructure.realtime import (
    ConnectionRegistry,
    NotificationDispatcher,
    WebSocketTransport,
)
from lostfound.infrastructure.realtime.events import (
    MESSAGE_SENT,
    RECEIVE_MESSAGE,
    ephemeral_message_payload,
)
from lostfound.interfaces.api.dependencies import resolve_user_from_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hub"])


def _authenticate(token: str | None) -> User:
    session = SessionLocal()
    try:
        return resolve_user_from_token(token, session)
    finally:
        session.close()


def _relay_private_message(
    dispatcher: NotificationDispatcher, sender: User, frame: dict[str, Any]
) -> None:
    """Push a hub message to both participants without storing it."""

    receiver_id = int(frame["receiverId"])
    content = frame.get("content")
    if receiver_id == sender.id or not isinstance(content, str) or not content.strip():
        return
    payload = ephemeral_message_payload(sender.id, receiver_id, content)
    dispatcher.dispatch([receiver_id], RECEIVE_MESSAGE, payload)
    dispatcher.dispatch([sender.id], MESSAGE_SENT, payload)


@router.websocket("/hubs/messages")
async def messages_hub(websocket: WebSocket) -> None:
    """Keep one push connection open for the user named by ``access_token``."""

    token = websocket.query_params.get("access_token")
    try:
        user = await to_thread.run_sync(_authenticate, token)
    except ValueError as exc:
        logger.info("Rejected hub connection: %s", exc)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    state = websocket.app.state
    registry: ConnectionRegistry = state.connection_registry
    transport: WebSocketTransport = state.push_transport
    dispatcher: NotificationDispatcher = state.notification_dispatcher

    connection_id = uuid4().hex
    transport.attach(connection_id, websocket)
    registry.register(user.id, connection_id)
    logger.info("User %s connected to hub as %s", user.id, connection_id)
    try:
        await websocket.accept()
        while True:
            try:
                frame = await websocket.receive_json()
            except WebSocketDisconnect:
                break
            except (KeyError, ValueError):
                # Binary or non-JSON frame.
                continue

            if not isinstance(frame, dict):
                continue
            frame_type = frame.get("type")
            if frame_type == "ping":
                await transport.send_frame(connection_id, {"type": "pong"})
            elif frame_type == "SendPrivateMessage":
                try:
                    _relay_private_message(dispatcher, user, frame)
                except (KeyError, TypeError, ValueError):
                    continue
    finally:
        registry.unregister(user.id, connection_id)
        transport.detach(connection_id)
        logger.info("User %s disconnected from hub (%s)", user.id, connection_id)
