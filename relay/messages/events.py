"""Inbound client events.

Each event kind the relay accepts is modelled as its own dataclass.
``decode_event`` turns an already-parsed JSON object into the matching
event, raising ValidationError when required fields are missing or have
the wrong type.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

from ..config import WS_ERROR_INVALID_MESSAGE, WS_ERROR_UNKNOWN_TYPE
from ..errors import ValidationError


def _environment(production: bool) -> str:
    return "prod" if production else "dev"


@dataclass(slots=True, frozen=True)
class PingEvent:
    type: ClassVar[str] = "ping"


@dataclass(slots=True, frozen=True)
class AuthEvent:
    type: ClassVar[str] = "auth"

    password: str
    agent_name: str | None = None


@dataclass(slots=True, frozen=True)
class ChangePasswordEvent:
    type: ClassVar[str] = "change_password"

    current_password: str
    new_password: str


@dataclass(slots=True, frozen=True)
class VoiceCommandEvent:
    """Spoken user text; replies are spoken back (``speak`` true)."""

    type: ClassVar[str] = "voice_command"
    speak: ClassVar[bool] = True

    text: str
    timestamp: int | None = None
    session_id: str | None = None
    production: bool = False

    @property
    def environment(self) -> str:
        return _environment(self.production)


@dataclass(slots=True, frozen=True)
class ChatMessageEvent:
    """Typed user text; replies are displayed only (``speak`` false)."""

    type: ClassVar[str] = "chat_message"
    speak: ClassVar[bool] = False

    text: str
    timestamp: int | None = None
    session_id: str | None = None
    production: bool = False

    @property
    def environment(self) -> str:
        return _environment(self.production)


@dataclass(slots=True, frozen=True)
class NotificationEvent:
    type: ClassVar[str] = "notification"

    app: str
    title: str
    text: str
    production: bool = False

    @property
    def environment(self) -> str:
        return _environment(self.production)


@dataclass(slots=True, frozen=True)
class EndConversationEvent:
    type: ClassVar[str] = "end_conversation"

    session_id: str
    reason: str | None = None


ClientEvent = (
    PingEvent
    | AuthEvent
    | ChangePasswordEvent
    | VoiceCommandEvent
    | ChatMessageEvent
    | NotificationEvent
    | EndConversationEvent
)


def _invalid(message: str) -> ValidationError:
    return ValidationError(WS_ERROR_INVALID_MESSAGE, f"Invalid message format: {message}")


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise _invalid(f"'{key}' must be a string")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise _invalid(f"'{key}' must be a string")
    return value


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(f"'{key}' must be a number")
    return int(value)


def _production(data: dict[str, Any]) -> bool:
    return data.get("production") is True


def _decode_ping(data: dict[str, Any]) -> PingEvent:
    return PingEvent()


def _decode_auth(data: dict[str, Any]) -> AuthEvent:
    return AuthEvent(
        password=_require_str(data, "password"),
        agent_name=_optional_str(data, "agentName"),
    )


def _decode_change_password(data: dict[str, Any]) -> ChangePasswordEvent:
    return ChangePasswordEvent(
        current_password=_require_str(data, "currentPassword"),
        new_password=_require_str(data, "newPassword"),
    )


def _decode_voice_command(data: dict[str, Any]) -> VoiceCommandEvent:
    return VoiceCommandEvent(
        text=_require_str(data, "text"),
        timestamp=_optional_int(data, "timestamp"),
        session_id=_optional_str(data, "sessionId"),
        production=_production(data),
    )


def _decode_chat_message(data: dict[str, Any]) -> ChatMessageEvent:
    return ChatMessageEvent(
        text=_require_str(data, "text"),
        timestamp=_optional_int(data, "timestamp"),
        session_id=_optional_str(data, "sessionId"),
        production=_production(data),
    )


def _decode_notification(data: dict[str, Any]) -> NotificationEvent:
    return NotificationEvent(
        app=_require_str(data, "app"),
        title=_optional_str(data, "title") or "",
        text=_optional_str(data, "text") or "",
        production=_production(data),
    )


def _decode_end_conversation(data: dict[str, Any]) -> EndConversationEvent:
    return EndConversationEvent(
        session_id=_require_str(data, "sessionId"),
        reason=_optional_str(data, "reason"),
    )


_DECODERS: dict[str, Callable[[dict[str, Any]], ClientEvent]] = {
    "ping": _decode_ping,
    "auth": _decode_auth,
    "change_password": _decode_change_password,
    "voice_command": _decode_voice_command,
    "chat_message": _decode_chat_message,
    "notification": _decode_notification,
    "end_conversation": _decode_end_conversation,
}


def decode_event(data: dict[str, Any]) -> ClientEvent:
    """Build the typed event for a decoded JSON object.

    Raises:
        ValidationError: ``unknown_message_type`` for unrecognized types,
            ``invalid_message`` for missing or mistyped fields.
    """
    msg_type = data.get("type")
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise _invalid("missing 'type'")
    decoder = _DECODERS.get(msg_type.strip().lower())
    if decoder is None:
        raise ValidationError(WS_ERROR_UNKNOWN_TYPE, f"Unknown message type: {msg_type}")
    return decoder(data)


__all__ = [
    "AuthEvent",
    "ChangePasswordEvent",
    "ChatMessageEvent",
    "ClientEvent",
    "EndConversationEvent",
    "NotificationEvent",
    "PingEvent",
    "VoiceCommandEvent",
    "decode_event",
]
