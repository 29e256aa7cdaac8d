"""Unit tests for exception-to-label classification."""

from __future__ import annotations

import httpx

from relay.errors import ValidationError, classify_error


def test_classify_error_known_categories() -> None:
    request = httpx.Request("POST", "http://automation.test")
    assert classify_error(ValidationError("invalid_message", "bad payload")) == "validation"
    assert classify_error(httpx.ReadTimeout("slow", request=request)) == "timeout"
    assert classify_error(TimeoutError("deadline exceeded")) == "timeout"
    assert classify_error(httpx.ConnectError("refused", request=request)) == "http"
    assert classify_error(ConnectionError("socket closed")) == "connection"


def test_classify_error_defaults_to_unknown() -> None:
    assert classify_error(RuntimeError("boom")) == "unknown"
