"""Registry of live client connections.

This module tracks one entry per connected client, keyed by the client
identifier the client presented at connect time (or a generated one). It
provides:

- Registration and removal of connections
- Direct send to one client and broadcast to all
- Iteration over connected clients (REST push surface, diagnostics)

Delivery is best effort: connections whose transport is not open are
skipped and counted as failures, and transport errors during send are
logged by the send helper instead of being raised.

Registering a client id that is already present replaces the previous
entry (last connect wins). The replaced transport is not closed; it simply
stops being reachable through the registry.

Example:
    registry = ConnectionRegistry()

    registry.add("phone-1", websocket)
    await registry.send_to("phone-1", {"type": "pong"})
    reached = await registry.broadcast({"type": "response", "text": "hi", "speak": True})
    registry.remove("phone-1", websocket)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import WebSocket

from .websocket.helpers import is_open, safe_send_json

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Holds live websocket connections keyed by client id.

    All methods run on the event loop; dictionary updates are never split
    across an ``await``, so no lock is required.
    """

    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}  # client_id -> websocket

    def add(self, client_id: str, websocket: WebSocket) -> None:
        if client_id in self._connections:
            logger.info("Connection replaced for client_id=%s", client_id)
        self._connections[client_id] = websocket
        logger.info("Connection added: client_id=%s (%s active)", client_id, len(self._connections))

    def remove(self, client_id: str, websocket: WebSocket | None = None) -> bool:
        """Remove a client's entry.

        Args:
            client_id: Client whose entry should be dropped.
            websocket: When given, the entry is only removed if it still
                belongs to this websocket (a replaced connection closing
                must not evict its replacement).

        Returns:
            True if an entry was removed.
        """
        current = self._connections.get(client_id)
        if current is None:
            return False
        if websocket is not None and current is not websocket:
            return False
        del self._connections[client_id]
        logger.info("Connection removed: client_id=%s (%s active)", client_id, len(self._connections))
        return True

    def get(self, client_id: str) -> WebSocket | None:
        return self._connections.get(client_id)

    def has(self, client_id: str) -> bool:
        return client_id in self._connections

    def client_ids(self) -> list[str]:
        return list(self._connections)

    def for_each(self, visitor: Callable[[str, WebSocket], Any]) -> None:
        """Call ``visitor(client_id, websocket)`` for every registered client."""
        for client_id, websocket in list(self._connections.items()):
            visitor(client_id, websocket)

    async def send_to(self, client_id: str, message: dict[str, Any]) -> bool:
        """Send a message to one client.

        Returns:
            True if the message was handed to an open transport.
        """
        websocket = self._connections.get(client_id)
        if websocket is None or not is_open(websocket):
            return False
        return await safe_send_json(websocket, message)

    async def broadcast(self, message: dict[str, Any]) -> int:
        """Send a message to every open connection.

        Returns:
            Number of clients the message was delivered to.
        """
        count = 0
        for websocket in list(self._connections.values()):
            if await safe_send_json(websocket, message):
                count += 1
        return count

    @property
    def size(self) -> int:
        return len(self._connections)

    def __len__(self) -> int:
        return len(self._connections)


__all__ = ["ConnectionRegistry"]
