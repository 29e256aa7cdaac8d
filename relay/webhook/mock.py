"""Offline stand-in for the automation backend.

MockWorkflowClient exposes the same coroutine interface as WorkflowClient
but answers from the static pattern table in ``relay.config.mock`` after a
short artificial delay. It is selected at startup when MOCK_MODE is set.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

from ..config import (
    DEFAULT_MOCK_RESPONSE,
    MOCK_DELAY_S,
    MOCK_IMPORTANT_APPS,
    MOCK_RESPONSES,
    START_CONVERSATION_ACTION,
)
from .models import WorkflowResult

logger = logging.getLogger(__name__)

_COMPILED: tuple[tuple[tuple[re.Pattern[str], ...], dict[str, Any]], ...] = tuple(
    (tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns), response)
    for patterns, response in MOCK_RESPONSES
)


def match_mock_response(text: str) -> dict[str, Any]:
    """Return the first canned response whose patterns match ``text``."""
    for patterns, response in _COMPILED:
        if any(pattern.search(text) for pattern in patterns):
            return response
    return DEFAULT_MOCK_RESPONSE


class MockWorkflowClient:
    """Canned-response workflow client."""

    def __init__(self, delay_s: float = MOCK_DELAY_S) -> None:
        self._delay_s = delay_s

    async def send_voice_command(
        self,
        text: str,
        session_id: str | None = None,
        context: dict[str, Any] | None = None,
        environment: str = "dev",
    ) -> WorkflowResult:
        await self._delay()
        logger.info("mock workflow voice command env=%s session=%s", environment, session_id or "-")
        return WorkflowResult.from_body(match_mock_response(text))

    async def send_notification(
        self,
        app: str,
        title: str,
        text: str,
        environment: str = "dev",
    ) -> WorkflowResult:
        await self._delay()
        lowered = app.lower()
        if any(name in lowered for name in MOCK_IMPORTANT_APPS):
            return WorkflowResult(
                success=True,
                response=f"Tienes una nueva notificación de {app}: {title}",
                action=START_CONVERSATION_ACTION,
                show={"type": "card", "title": app, "text": title},
            )
        return WorkflowResult(success=True)

    async def health_check(self, environment: str = "dev") -> bool:
        return True

    async def aclose(self) -> None:
        return None

    async def _delay(self) -> None:
        if self._delay_s > 0:
            await asyncio.sleep(self._delay_s)


__all__ = ["MockWorkflowClient", "match_mock_response"]
