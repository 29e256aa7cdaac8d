"""Primary WebSocket connection handler orchestration.

This module contains the entry point for every client connection. It
orchestrates:

1. Connection Setup:
   - Client id resolution (``clientId`` query parameter or a fresh uuid4)
   - Registration in the connection registry

2. Message Handling:
   - Frame decoding into typed events (invalid frames get an error event)
   - Authentication gate: only ping/auth pass until authenticated
   - auth / change_password answered locally
   - Everything else dispatched to the message router

3. Cleanup:
   - Authentication state revoked
   - Registry entry removed (only if it still belongs to this socket)
   - Sessions owned by the client ended with reason ``system``

Frames are processed one at a time per connection; a failing handler is
logged and answered with an ``internal_error`` event and the loop goes on.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from fastapi import WebSocket

from ...config import (
    WS_CLIENT_ID_PARAM,
    WS_ERROR_INTERNAL,
    WS_ERROR_NOT_AUTHENTICATED,
)
from ...errors import ValidationError, classify_error
from ...logging import log_context
from ...messages.events import AuthEvent, ChangePasswordEvent, ClientEvent
from .auth import AuthGate
from .disconnects import is_expected_disconnect
from .errors import send_error
from .helpers import safe_send_json
from .parser import parse_client_message

if TYPE_CHECKING:
    from ...runtime.dependencies import RuntimeDeps

logger = logging.getLogger(__name__)

SendFn = Callable[[dict[str, Any]], Awaitable[bool]]


def resolve_client_id(ws: WebSocket) -> str:
    client_id = ws.query_params.get(WS_CLIENT_ID_PARAM)
    if client_id and client_id.strip():
        return client_id.strip()
    return str(uuid.uuid4())


async def _receive_frame(ws: WebSocket) -> str | None:
    """Return the next text frame, or None once the client disconnects."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        return None
    text = message.get("text")
    if text is not None:
        return text
    data = message.get("bytes")
    if data is not None:
        return data.decode("utf-8", errors="replace")
    return ""


async def _handle_auth_event(gate: AuthGate, event: ClientEvent, send: SendFn) -> bool:
    """Answer auth / change_password locally; return True if handled."""
    if isinstance(event, AuthEvent):
        await send(gate.authenticate(event.password, event.agent_name))
        return True
    if isinstance(event, ChangePasswordEvent):
        await send(gate.change_password(event.current_password, event.new_password))
        return True
    return False


async def _process_frame(
    ws: WebSocket,
    raw: str,
    client_id: str,
    gate: AuthGate,
    deps: RuntimeDeps,
    send: SendFn,
) -> None:
    try:
        event = parse_client_message(raw)
    except ValidationError as exc:
        logger.info("WS recv: rejected frame (%s)", exc.error_code)
        await send_error(ws, error_code=exc.error_code, message=exc.message)
        return

    if not gate.allows(event.type):
        await send_error(ws, error_code=WS_ERROR_NOT_AUTHENTICATED, message="Not authenticated")
        return

    try:
        if await _handle_auth_event(gate, event, send):
            return
        await deps.router.handle(client_id, event, send)
    except Exception as exc:
        if is_expected_disconnect(exc):
            raise
        logger.exception("WS handler for %s failed (%s)", event.type, classify_error(exc))
        await send_error(ws, error_code=WS_ERROR_INTERNAL, message="Internal error processing message")


async def handle_websocket_connection(ws: WebSocket, deps: RuntimeDeps) -> None:
    """Handle one client websocket from accept to cleanup.

    Args:
        ws: The incoming WebSocket connection from FastAPI.
        deps: Long-lived services shared by all connections.
    """
    client_id = resolve_client_id(ws)
    await ws.accept()
    deps.connections.add(client_id, ws)
    gate = AuthGate(deps.password_store)

    async def send(payload: dict[str, Any]) -> bool:
        return await safe_send_json(ws, payload)

    with log_context(client_id=client_id):
        logger.info("WebSocket connection accepted. Active: %s", deps.connections.size)
        try:
            while True:
                raw = await _receive_frame(ws)
                if raw is None:
                    break
                await _process_frame(ws, raw, client_id, gate, deps, send)
        except Exception as exc:  # noqa: BLE001
            if is_expected_disconnect(exc):
                logger.info("WebSocket disconnected: %s", type(exc).__name__)
            else:
                logger.exception("WebSocket error")
        finally:
            gate.revoke()
            # A newer socket registered under the same id keeps its registry entry
            deps.connections.remove(client_id, ws)
            ended = deps.sessions.end_sessions_for_client(client_id, "system")
            if ended:
                logger.info("ended %s session(s) on disconnect", len(ended))
            logger.info("WebSocket connection closed. Active: %s", deps.connections.size)


__all__ = ["handle_websocket_connection", "resolve_client_id"]
