"""Unit tests for websocket error payload building."""

from __future__ import annotations

import asyncio

from relay.handlers.websocket.errors import build_error_payload, send_error
from tests.support.fakes import FakeWebSocket


def test_build_error_payload_basic() -> None:
    result = build_error_payload("err_code", "something went wrong")
    assert result == {"type": "error", "message": "something went wrong", "error_code": "err_code"}


def test_build_error_payload_extra_does_not_overwrite() -> None:
    result = build_error_payload("err", "msg", extra={"message": "other", "hint": "retry"})
    assert result["message"] == "msg"
    assert result["hint"] == "retry"


def test_send_error_is_best_effort() -> None:
    ws = FakeWebSocket()
    assert asyncio.run(send_error(ws, error_code="invalid_message", message="bad")) is True
    assert ws.types() == ["error"]

    ws.close_client()
    assert asyncio.run(send_error(ws, error_code="invalid_message", message="bad")) is False
