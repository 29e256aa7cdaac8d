"""Runtime dependency container.

All long-lived runtime services are assembled at startup and passed explicitly
to the websocket handler and REST routes. Nothing is created lazily while a
connection or request is being served.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relay.handlers.connections import ConnectionRegistry
    from relay.handlers.passwords import PasswordStore
    from relay.handlers.session.manager import SessionManager
    from relay.handlers.session.sweep import SessionSweeper
    from relay.messages.router import MessageRouter, WorkflowBackend


@dataclass(slots=True)
class RuntimeDeps:
    """Process-wide runtime services initialized during startup."""

    connections: ConnectionRegistry
    sessions: SessionManager
    password_store: PasswordStore
    workflow: WorkflowBackend
    router: MessageRouter
    sweeper: SessionSweeper
    mock_mode: bool = False

    def start(self) -> None:
        self.sweeper.start()

    async def shutdown(self) -> None:
        await self.sweeper.stop()
        await self.workflow.aclose()
