"""Unit tests for websocket frame parsing."""

from __future__ import annotations

import pytest

from relay.errors import ValidationError
from relay.handlers.websocket.parser import parse_client_message
from relay.messages.events import (
    AuthEvent,
    ChatMessageEvent,
    EndConversationEvent,
    NotificationEvent,
    PingEvent,
    VoiceCommandEvent,
)


def test_parse_ping() -> None:
    assert isinstance(parse_client_message('{"type": "ping"}'), PingEvent)


def test_parse_auth_with_agent_name() -> None:
    event = parse_client_message('{"type": "auth", "password": "pw", "agentName": "Yarvis"}')
    assert event == AuthEvent(password="pw", agent_name="Yarvis")


def test_parse_voice_command_production_flag() -> None:
    event = parse_client_message(
        '{"type": "voice_command", "text": "hola", "timestamp": 1700000000000, "production": true}'
    )
    assert isinstance(event, VoiceCommandEvent)
    assert event.speak is True
    assert event.environment == "prod"
    assert event.timestamp == 1700000000000


def test_parse_chat_message_defaults_to_dev() -> None:
    event = parse_client_message('{"type": "chat_message", "text": "hola", "timestamp": 1}')
    assert isinstance(event, ChatMessageEvent)
    assert event.speak is False
    assert event.environment == "dev"


def test_parse_notification_and_end_conversation() -> None:
    note = parse_client_message('{"type": "notification", "app": "gmail", "title": "t", "text": "b"}')
    assert note == NotificationEvent(app="gmail", title="t", text="b")
    end = parse_client_message('{"type": "end_conversation", "sessionId": "s1"}')
    assert end == EndConversationEvent(session_id="s1")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "not json",
        "[1, 2]",
        '{"text": "no type"}',
        '{"type": "voice_command"}',
        '{"type": "voice_command", "text": 5}',
        '{"type": "auth"}',
        '{"type": "end_conversation"}',
    ],
)
def test_invalid_frames_raise_invalid_message(raw: str) -> None:
    with pytest.raises(ValidationError) as err:
        parse_client_message(raw)
    assert err.value.error_code == "invalid_message"
    assert err.value.message.startswith("Invalid message format")


def test_unknown_type_raises_unknown_message_type() -> None:
    with pytest.raises(ValidationError) as err:
        parse_client_message('{"type": "teleport"}')
    assert err.value.error_code == "unknown_message_type"
