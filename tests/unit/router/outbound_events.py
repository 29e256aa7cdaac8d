"""Unit tests for outbound event builders."""

from __future__ import annotations

from relay.messages.outbound import response_event, start_conversation_event


def test_response_event_omits_absent_keys_and_sets_message_id() -> None:
    first = response_event("hola", True)
    second = response_event("hola", True)
    assert set(first) == {"type", "text", "speak", "messageId"}
    assert first["messageId"] != second["messageId"]


def test_start_conversation_event_keeps_given_fields() -> None:
    frame = start_conversation_event("s1", greeting="hey", show={"type": "text"})
    assert frame == {"type": "start_conversation", "sessionId": "s1", "greeting": "hey", "show": {"type": "text"}}
