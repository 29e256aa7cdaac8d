"""Runtime dependency bootstrap.

This module eagerly builds all long-lived services at startup. Request
handlers consume these dependencies directly instead of reaching for
module-level singletons.
"""

from __future__ import annotations

import logging

from relay.config import (
    MOCK_DELAY_S,
    MOCK_MODE,
    SESSION_SWEEP_INTERVAL_S,
    SESSION_TIMEOUT_S,
    WORKFLOW_TIMEOUT_S,
)
from relay.handlers.connections import ConnectionRegistry
from relay.handlers.passwords import PasswordStore
from relay.handlers.session.manager import SessionManager
from relay.handlers.session.sweep import SessionSweeper
from relay.messages.router import MessageRouter, WorkflowBackend
from relay.webhook.client import WorkflowClient
from relay.webhook.mock import MockWorkflowClient

from .dependencies import RuntimeDeps

logger = logging.getLogger(__name__)


def _build_workflow(mock_mode: bool) -> WorkflowBackend:
    if mock_mode:
        logger.info("workflow backend: mock (delay=%ss)", MOCK_DELAY_S)
        return MockWorkflowClient(delay_s=MOCK_DELAY_S)
    client = WorkflowClient(timeout_s=WORKFLOW_TIMEOUT_S)
    for env in client.environments.values():
        logger.info("workflow backend %s: %s", env.name, env.url or "<not configured>")
    return client


def build_runtime_deps(
    *,
    mock_mode: bool = MOCK_MODE,
    password_store: PasswordStore | None = None,
    workflow: WorkflowBackend | None = None,
) -> RuntimeDeps:
    """Build runtime dependencies from process configuration.

    Raises:
        RuntimeError: If no relay password is configured.
    """
    connections = ConnectionRegistry()
    sessions = SessionManager(timeout_s=SESSION_TIMEOUT_S)
    store = password_store if password_store is not None else PasswordStore()
    backend = workflow if workflow is not None else _build_workflow(mock_mode)
    router = MessageRouter(sessions, connections, backend)
    sweeper = SessionSweeper(sessions, connections, interval_s=SESSION_SWEEP_INTERVAL_S)

    return RuntimeDeps(
        connections=connections,
        sessions=sessions,
        password_store=store,
        workflow=backend,
        router=router,
        sweeper=sweeper,
        mock_mode=mock_mode,
    )


__all__ = ["build_runtime_deps"]
