"""Main FastAPI server for the voice/chat relay.

This module builds the HTTP application that sits between client websocket
connections and the automation backend. It provides:

- REST endpoints for health checks (/, /health, /healthz)
- WebSocket endpoint for clients (/ws?clientId=...)
- REST push endpoints for automation systems (/api/*)
- Periodic expiry of idle conversation sessions

Server Lifecycle:
    1. On startup: Build runtime dependencies, start the session sweeper,
       probe the configured webhook endpoints
    2. Accept WebSocket connections on /ws
    3. Route each frame through the auth gate and message router
    4. On shutdown: Stop the sweeper and close the HTTP client

Example:
    Run directly with uvicorn:
        $ uvicorn relay.server:app --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, WebSocket
from fastapi.responses import ORJSONResponse

from .api import router as api_router
from .handlers.websocket import handle_websocket_connection
from .logging import configure_logging
from .runtime import RuntimeDeps, build_runtime_deps
from .webhook.client import WorkflowClient

logger = logging.getLogger(__name__)

SERVICE_NAME = "Yarvis Relay"
SERVICE_VERSION = "1.2.0"


async def _probe_webhooks(deps: RuntimeDeps) -> None:
    """Log whether each configured webhook endpoint answers."""
    if deps.mock_mode:
        logger.info("mock mode enabled: webhook health checks skipped")
        return
    for environment in ("dev", "prod"):
        healthy = await deps.workflow.health_check(environment)
        if healthy:
            logger.info("webhook %s reachable", environment)
        else:
            logger.warning("webhook %s not reachable", environment)


def _health_payload(deps: RuntimeDeps) -> dict:
    payload = {
        "status": "ok",
        "mockMode": deps.mock_mode,
        "connections": deps.connections.size,
        "activeSessions": len(deps.sessions),
    }
    workflow = deps.workflow
    if isinstance(workflow, WorkflowClient):
        payload["workflowUrlDev"] = workflow.environments["dev"].url
        payload["workflowUrlProd"] = workflow.environments["prod"].url
    return payload


def create_app(deps: RuntimeDeps | None = None) -> FastAPI:
    """Create the relay application.

    Args:
        deps: Prebuilt runtime dependencies (tests); built on startup when
            omitted.
    """
    app = FastAPI(title=SERVICE_NAME, default_response_class=ORJSONResponse)
    app.state.deps = deps
    app.include_router(api_router)

    @app.on_event("startup")
    async def start_runtime() -> None:
        if app.state.deps is None:
            app.state.deps = build_runtime_deps()
        runtime: RuntimeDeps = app.state.deps
        runtime.start()
        await _probe_webhooks(runtime)
        logger.info("relay ready (mock_mode=%s)", runtime.mock_mode)

    @app.on_event("shutdown")
    async def stop_runtime() -> None:
        runtime: RuntimeDeps | None = app.state.deps
        if runtime is not None:
            await runtime.shutdown()

    @app.get("/")
    async def root():
        """Service info and endpoint map."""
        return {
            "name": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "endpoints": {
                "websocket": "/ws",
                "health": "/health",
                "speak": "POST /api/speak",
                "endConversation": "POST /api/end-conversation",
                "broadcast": "POST /api/broadcast",
                "sessions": "GET /api/sessions",
                "clients": "GET /api/clients",
            },
        }

    @app.get("/health")
    async def health(request: Request):
        """Health check with connection and session counts (no authentication required)."""
        return _health_payload(request.app.state.deps)

    @app.get("/healthz")
    async def healthz(request: Request):
        """Health check endpoint (no authentication required)."""
        return _health_payload(request.app.state.deps)

    @app.get("/favicon.ico", status_code=204)
    async def favicon():
        """Suppress favicon requests from browsers/probes."""
        return None

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """Client WebSocket endpoint."""
        await handle_websocket_connection(websocket, websocket.app.state.deps)

    return app


configure_logging()
app = create_app()


__all__ = ["app", "create_app"]
