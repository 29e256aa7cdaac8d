"""Shared response helpers for WebSocket error handling.

All error events follow the same JSON structure:

    {
        "type": "error",
        "message": "Human-readable description",
        "error_code": "invalid_message"
    }

Error codes used by the relay:
    - invalid_message: Malformed JSON, missing type or missing fields
    - unknown_message_type: Unrecognized message type
    - not_authenticated: Event sent before a successful ``auth``
    - workflow_error: Automation backend call failed
    - internal_error: Unexpected server error while handling a frame
"""

from __future__ import annotations

from typing import Any

from fastapi import WebSocket

from .helpers import safe_send_json


def build_error_payload(
    error_code: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "type": "error",
        "message": message,
        "error_code": error_code,
    }
    if extra:
        for key, value in extra.items():
            payload.setdefault(key, value)
    return payload


async def send_error(
    ws: WebSocket,
    *,
    error_code: str,
    message: str,
    extra: dict[str, Any] | None = None,
) -> bool:
    """Send a structured error event to the client (best effort).

    Args:
        ws: The WebSocket connection.
        error_code: Machine-readable error identifier.
        message: Human-readable error description.
        extra: Additional fields to include in the event.
    """
    return await safe_send_json(ws, build_error_payload(error_code, message, extra))


__all__ = ["build_error_payload", "send_error"]
