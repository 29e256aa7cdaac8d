"""Client frame parsing for the WebSocket handler."""

from __future__ import annotations

import json

from ...config import WS_ERROR_INVALID_MESSAGE
from ...errors import ValidationError
from ...messages.events import ClientEvent, decode_event


def _invalid(message: str) -> ValidationError:
    return ValidationError(WS_ERROR_INVALID_MESSAGE, f"Invalid message format: {message}")


def parse_client_message(raw: str) -> ClientEvent:
    """Decode one text frame into a typed client event.

    Raises:
        ValidationError: When the frame is empty, not JSON, not an object,
            or does not describe a known event.
    """
    text = (raw or "").strip()
    if not text:
        raise _invalid("empty message")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise _invalid("message must be valid JSON") from exc

    if not isinstance(data, dict):
        raise _invalid("message must be a JSON object")

    return decode_event(data)


__all__ = ["parse_client_message"]
