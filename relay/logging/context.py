"""Logging context helpers for consistent structured fields."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_CLIENT_ID: ContextVar[str] = ContextVar("client_id", default="-")
_SESSION_ID: ContextVar[str] = ContextVar("session_id", default="-")


def set_log_context(
    *,
    client_id: str | None = None,
    session_id: str | None = None,
) -> list[tuple[ContextVar[str], Token[str]]]:
    """Set log context values and return tokens for reset."""
    tokens: list[tuple[ContextVar[str], Token[str]]] = []
    if client_id is not None:
        tokens.append((_CLIENT_ID, _CLIENT_ID.set(client_id)))
    if session_id is not None:
        tokens.append((_SESSION_ID, _SESSION_ID.set(session_id)))
    return tokens


def reset_log_context(tokens: list[tuple[ContextVar[str], Token[str]]]) -> None:
    """Reset log context values using tokens returned by set_log_context."""
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(
    *,
    client_id: str | None = None,
    session_id: str | None = None,
) -> Iterator[None]:
    """Context manager for applying log fields within a block."""
    tokens = set_log_context(client_id=client_id, session_id=session_id)
    try:
        yield
    finally:
        reset_log_context(tokens)


def install_log_context() -> None:
    """Install a LogRecord factory that injects context fields."""
    if getattr(install_log_context, "_installed", False):
        return

    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.client_id = _CLIENT_ID.get()
        record.session_id = _SESSION_ID.get()
        return record

    logging.setLogRecordFactory(record_factory)
    install_log_context._installed = True  # type: ignore[attr-defined]


def configure_logging() -> None:
    """Initialize root logging configuration once per process."""
    from relay.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT  # noqa: PLC0415

    install_log_context()
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=APP_LOG_LEVEL, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    else:
        root_logger.setLevel(APP_LOG_LEVEL)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(APP_LOG_LEVEL)
                handler.setFormatter(logging.Formatter(APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT))

    logging.getLogger("relay").setLevel(APP_LOG_LEVEL)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = [
    "install_log_context",
    "log_context",
    "reset_log_context",
    "set_log_context",
    "configure_logging",
]
