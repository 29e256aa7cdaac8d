"""Exception classification helpers for log labels."""

from __future__ import annotations

import json

import httpx

from .validation import ValidationError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, "validation"),
    (httpx.TimeoutException, "timeout"),
    (TimeoutError, "timeout"),
    (httpx.HTTPError, "http"),
    (json.JSONDecodeError, "decode"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
