"""In-memory stand-ins for websockets, clocks and the workflow backend."""

from __future__ import annotations

import json
from typing import Any

from starlette.websockets import WebSocketState

from relay.webhook.models import WorkflowResult


class FakeClock:
    """Manually advanced epoch-millisecond clock."""

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


class FakeWebSocket:
    """Records JSON frames sent to it."""

    def __init__(self, *, fail_with: BaseException | None = None) -> None:
        self.client_state = WebSocketState.CONNECTED
        self.application_state = WebSocketState.CONNECTED
        self.fail_with = fail_with
        self.sent: list[dict[str, Any]] = []

    async def send_text(self, text: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append(json.loads(text))

    def close_client(self) -> None:
        self.client_state = WebSocketState.DISCONNECTED

    def types(self) -> list[str]:
        return [frame["type"] for frame in self.sent]


class Outbox:
    """Async send callable collecting router output."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    async def __call__(self, payload: dict[str, Any]) -> bool:
        self.sent.append(payload)
        return True

    def types(self) -> list[str]:
        return [frame["type"] for frame in self.sent]


class FakeWorkflow:
    """Workflow backend returning queued results and recording calls."""

    def __init__(self, *results: WorkflowResult) -> None:
        self._results = list(results)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.closed = False

    def queue(self, result: WorkflowResult) -> None:
        self._results.append(result)

    def _next(self) -> WorkflowResult:
        if not self._results:
            return WorkflowResult(success=True)
        return self._results.pop(0)

    async def send_voice_command(
        self,
        text: str,
        session_id: str | None = None,
        context: dict[str, Any] | None = None,
        environment: str = "dev",
    ) -> WorkflowResult:
        self.calls.append(
            ("voice_command", {"text": text, "session_id": session_id, "context": context, "environment": environment})
        )
        return self._next()

    async def send_notification(
        self,
        app: str,
        title: str,
        text: str,
        environment: str = "dev",
    ) -> WorkflowResult:
        self.calls.append(("notification", {"app": app, "title": title, "text": text, "environment": environment}))
        return self._next()

    async def health_check(self, environment: str = "dev") -> bool:
        return True

    async def aclose(self) -> None:
        self.closed = True
