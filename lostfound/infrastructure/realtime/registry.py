"""Track which push connections are open for each user."""

from __future__ import annotations

import threading


class _UserConnections:
    """Connection ids of one user guarded by their own lock."""

    __slots__ = ("lock", "connection_ids", "retired")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.connection_ids: set[str] = set()
        # Set once the entry emptied and is being removed from the registry.
        self.retired = False


class ConnectionRegistry:
    """Map ``user_id`` to the set of connection ids that user has open.

    Callers run both on the event loop and in worker threads, so every
    mutation of a user's set happens under that user's lock. The outer
    mapping has its own lock which is only held to look up, insert or
    remove an entry.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[int, _UserConnections] = {}

    def register(self, user_id: int, connection_id: str) -> None:
        """Record that ``connection_id`` belongs to ``user_id``."""

        while True:
            entry = self._entry_for_update(user_id)
            with entry.lock:
                if entry.retired:
                    continue
                entry.connection_ids.add(connection_id)
                return

    def unregister(self, user_id: int, connection_id: str) -> None:
        """Forget ``connection_id``; drop the user once no connection remains."""

        with self._lock:
            entry = self._entries.get(user_id)
        if entry is None:
            return

        with entry.lock:
            entry.connection_ids.discard(connection_id)
            if entry.connection_ids or entry.retired:
                return
            entry.retired = True

        with self._lock:
            if self._entries.get(user_id) is entry:
                del self._entries[user_id]

    def connections_for(self, user_id: int) -> frozenset[str]:
        """Return a snapshot of the connection ids open for ``user_id``."""

        with self._lock:
            entry = self._entries.get(user_id)
        if entry is None:
            return frozenset()
        with entry.lock:
            return frozenset(entry.connection_ids)

    def user_ids(self) -> frozenset[int]:
        with self._lock:
            return frozenset(self._entries)

    def connection_count(self) -> int:
        with self._lock:
            entries = list(self._entries.values())
        total = 0
        for entry in entries:
            with entry.lock:
                total += len(entry.connection_ids)
        return total

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._entries

    def _entry_for_update(self, user_id: int) -> _UserConnections:
        with self._lock:
            entry = self._entries.get(user_id)
            if entry is None or entry.retired:
                entry = _UserConnections()
                self._entries[user_id] = entry
            return entry


__all__ = ["ConnectionRegistry"]
