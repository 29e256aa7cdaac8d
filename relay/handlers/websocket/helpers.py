"""WebSocket send utilities.

Every outbound frame goes through ``safe_send_json`` so delivery is best
effort everywhere:

- A socket that is not open is skipped and reported as a failed send
- A transport error during send is logged and reported as a failed send
- Nothing raises back into the caller
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)


def is_open(ws: WebSocket) -> bool:
    """Return True when both sides of the websocket are connected."""
    client_state = getattr(ws, "client_state", WebSocketState.CONNECTED)
    application_state = getattr(ws, "application_state", WebSocketState.CONNECTED)
    return client_state == WebSocketState.CONNECTED and application_state == WebSocketState.CONNECTED


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    """Send text to the client, returning False if the socket is gone.

    Args:
        ws: The WebSocket connection.
        text: Raw text to send.

    Returns:
        True if sent successfully, False if skipped or the send failed.
    """
    if not is_open(ws):
        return False
    try:
        await ws.send_text(text)
    except Exception as exc:  # noqa: BLE001
        if is_expected_disconnect(exc):
            logger.info("WebSocket disconnected while sending %s bytes", len(text))
        else:
            logger.warning("WebSocket send failed: %s", exc, exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, payload: dict[str, Any]) -> bool:
    """Serialize and send a JSON payload, swallowing transport failures."""
    return await safe_send_text(ws, json.dumps(payload, ensure_ascii=False))


__all__ = [
    "is_open",
    "safe_send_text",
    "safe_send_json",
]
