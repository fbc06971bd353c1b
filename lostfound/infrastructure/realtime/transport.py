"""Push transports able to deliver events to a single connection."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from fastapi import WebSocket

logger = logging.getLogger(__name__)


class PushTransport(Protocol):
    """Deliver one event to one open connection."""

    async def send(self, connection_id: str, event: str, payload: Any) -> None:
        ...


class WebSocketTransport:
    """Send JSON frames to the websockets attached by the hub endpoint."""

    def __init__(self) -> None:
        self._sockets: dict[str, WebSocket] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def attach(self, connection_id: str, websocket: WebSocket) -> None:
        self._sockets[connection_id] = websocket
        self._locks[connection_id] = asyncio.Lock()

    def detach(self, connection_id: str) -> None:
        self._sockets.pop(connection_id, None)
        self._locks.pop(connection_id, None)

    async def send(self, connection_id: str, event: str, payload: Any) -> None:
        """Send ``{"type": event, "data": payload}`` to ``connection_id``."""

        await self.send_frame(connection_id, {"type": event, "data": payload})

    async def send_frame(self, connection_id: str, frame: dict[str, Any]) -> None:
        """Send a raw JSON frame, keeping frames of one connection in call order."""

        websocket = self._sockets.get(connection_id)
        lock = self._locks.get(connection_id)
        if websocket is None or lock is None:
            logger.debug("Skipping send to detached connection %s", connection_id)
            return
        async with lock:
            await websocket.send_json(frame)


__all__ = ["PushTransport", "WebSocketTransport"]
