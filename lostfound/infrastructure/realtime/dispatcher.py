"""Fan domain events out to every open connection of their recipients."""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import Iterable
from typing import Any

from anyio import from_thread

from .registry import ConnectionRegistry
from .transport import PushTransport

logger = logging.getLogger(__name__)

Delivery = tuple[str, dict[str, Any]]


class NotificationDispatcher:
    """Resolve recipients to live connections and push an event to each.

    Deliveries are fire-and-forget: each one runs as its own task, failures
    are logged and never reach the caller. ``dispatch`` can be called from a
    coroutine on the event loop or from a synchronous handler running in an
    AnyIO worker thread.
    """

    def __init__(self, registry: ConnectionRegistry, transport: PushTransport) -> None:
        self._registry = registry
        self._transport = transport
        self._pending: set[asyncio.Task] = set()

    def dispatch(
        self,
        recipients: Iterable[int | None],
        event: str,
        payload: dict[str, Any],
        *,
        acting_user_id: int | None = None,
    ) -> int:
        """Schedule ``event`` for every connection of ``recipients``.

        When ``acting_user_id`` is given each payload carries
        ``suppressAlert``, ``True`` only for the acting user's connections.
        Returns the number of deliveries scheduled.
        """

        deliveries: list[Delivery] = []
        seen: set[int] = set()
        for user_id in recipients:
            if not user_id or user_id in seen:
                continue
            seen.add(user_id)
            connection_ids = self._registry.connections_for(user_id)
            if not connection_ids:
                continue
            body = copy.deepcopy(payload)
            if acting_user_id is not None:
                body["suppressAlert"] = user_id == acting_user_id
            deliveries.extend((connection_id, body) for connection_id in connection_ids)

        if not deliveries:
            return 0
        return self._schedule(event, deliveries)

    async def aclose(self) -> None:
        """Wait for the deliveries still in flight."""

        pending = [task for task in self._pending if not task.done()]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def _schedule(self, event: str, deliveries: list[Delivery]) -> int:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            try:
                from_thread.run_sync(self._spawn, event, deliveries)
            except RuntimeError:
                logger.warning(
                    "No event loop reachable, dropped %d %s deliveries",
                    len(deliveries),
                    event,
                )
                return 0
        else:
            self._spawn(event, deliveries)
        return len(deliveries)

    def _spawn(self, event: str, deliveries: list[Delivery]) -> None:
        loop = asyncio.get_running_loop()
        for connection_id, body in deliveries:
            task = loop.create_task(self._deliver(connection_id, event, body))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _deliver(self, connection_id: str, event: str, payload: dict[str, Any]) -> None:
        try:
            await self._transport.send(connection_id, event, payload)
        except Exception:
            logger.warning(
                "Failed to deliver %s to connection %s", event, connection_id, exc_info=True
            )


__all__ = ["NotificationDispatcher"]
