"""Periodic expiry of idle conversation sessions.

The sweeper runs as an independent asyncio task. Every interval it asks the
session manager to drop sessions whose inactivity exceeds the timeout and
notifies each owning client with an ``end_conversation`` event carrying
reason ``timeout``. Clients that already disconnected are skipped by the
registry's best-effort send.

A session can therefore outlive its deadline by up to one sweep interval.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging

from ...config import SESSION_SWEEP_INTERVAL_S, TIMEOUT_FAREWELL
from ...errors import classify_error
from ...messages.outbound import end_conversation_event
from ..connections import ConnectionRegistry
from .manager import SessionManager

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Background task expiring idle sessions."""

    def __init__(
        self,
        sessions: SessionManager,
        connections: ConnectionRegistry,
        interval_s: float = SESSION_SWEEP_INTERVAL_S,
    ):
        self._sessions = sessions
        self._connections = connections
        self._interval_s = interval_s
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the sweep loop if it is not already running."""
        if self.running:
            return
        if self._interval_s <= 0:
            logger.info("session sweeper disabled")
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def sweep_once(self) -> int:
        """Expire idle sessions and notify their owners.

        Returns:
            Number of sessions that were expired.
        """
        expired = self._sessions.cleanup_expired_sessions()
        for session_id, client_id in expired:
            await self._connections.send_to(
                client_id,
                end_conversation_event(session_id, reason="timeout", farewell=TIMEOUT_FAREWELL),
            )
        return len(expired)

    async def _run(self) -> None:
        logger.info("session sweeper started interval=%ss", self._interval_s)
        while True:
            await asyncio.sleep(self._interval_s)
            try:
                await self.sweep_once()
            except Exception as exc:  # noqa: BLE001
                logger.exception("session sweep failed (%s)", classify_error(exc))


__all__ = ["SessionSweeper"]
