"""Unit tests for the offline mock workflow client."""

from __future__ import annotations

import asyncio

from relay.webhook.mock import MockWorkflowClient, match_mock_response


def test_greeting_matches_case_insensitively() -> None:
    result = asyncio.run(MockWorkflowClient(delay_s=0).send_voice_command("HOLA Yarvis"))
    assert result.success is True
    assert result.response.startswith("¡Hola!")


def test_reminder_returns_action() -> None:
    result = asyncio.run(MockWorkflowClient(delay_s=0).send_voice_command("recuérdame llamar a mamá"))
    assert result.action == "SET_REMINDER"
    assert result.params is not None


def test_farewell_ends_conversation() -> None:
    result = asyncio.run(MockWorkflowClient(delay_s=0).send_voice_command("bueno adiós"))
    assert result.end_conversation is True
    assert result.farewell


def test_unmatched_text_uses_default_reply() -> None:
    body = match_mock_response("xyzzy")
    assert body["success"] is True
    assert "response" in body


def test_important_notification_starts_conversation() -> None:
    result = asyncio.run(MockWorkflowClient(delay_s=0).send_notification("WhatsApp", "Ana", "hola"))
    assert result.action == "START_CONVERSATION"
    assert "Ana" in result.response


def test_other_notification_is_empty_success() -> None:
    result = asyncio.run(MockWorkflowClient(delay_s=0).send_notification("weather", "Rain", "today"))
    assert result.success is True
    assert result.response is None
    assert result.action is None


def test_health_check_is_always_true() -> None:
    assert asyncio.run(MockWorkflowClient(delay_s=0).health_check("prod")) is True
