"""Builders for relay → client events.

Keys whose value is absent are omitted from the emitted JSON object.
"""

from __future__ import annotations

import uuid
from typing import Any


def _compact(payload: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


def pong_event() -> dict[str, Any]:
    return {"type": "pong"}


def auth_response_event(success: bool, message: str | None = None) -> dict[str, Any]:
    return _compact({"type": "auth_response", "success": success, "message": message})


def change_password_response_event(success: bool, message: str) -> dict[str, Any]:
    return {"type": "change_password_response", "success": success, "message": message}


def response_event(
    text: str,
    speak: bool,
    *,
    session_id: str | None = None,
    show: Any = None,
    message_id: str | None = None,
) -> dict[str, Any]:
    """Assistant reply; every reply carries a fresh ``messageId``."""
    return _compact(
        {
            "type": "response",
            "text": text,
            "speak": speak,
            "sessionId": session_id,
            "messageId": message_id or str(uuid.uuid4()),
            "show": show,
        }
    )


def action_event(action: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    return _compact({"type": "action", "action": action, "params": params})


def start_conversation_event(
    session_id: str,
    *,
    greeting: str | None = None,
    context: dict[str, Any] | None = None,
    show: Any = None,
) -> dict[str, Any]:
    return _compact(
        {
            "type": "start_conversation",
            "sessionId": session_id,
            "greeting": greeting,
            "context": context,
            "show": show,
        }
    )


def end_conversation_event(
    session_id: str,
    *,
    reason: str,
    farewell: str | None = None,
) -> dict[str, Any]:
    return _compact(
        {
            "type": "end_conversation",
            "sessionId": session_id,
            "farewell": farewell,
            "reason": reason,
        }
    )


__all__ = [
    "action_event",
    "auth_response_event",
    "change_password_response_event",
    "end_conversation_event",
    "pong_event",
    "response_event",
    "start_conversation_event",
]
