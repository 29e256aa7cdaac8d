"""HTTP client for the automation backend webhooks.

WorkflowClient posts structured payloads to one of two configured endpoints
(``dev`` or ``prod``) and normalizes every outcome into a WorkflowResult:

- 2xx with a JSON object body: the body, ``success`` defaulting to True
- non-2xx: ``status <code>``
- timeout: ``<environment> request timed out``
- any other error: ``<environment>: <message>``

Each call is a single attempt with no retries. The timeout bounds the whole
call, response body included. The client is safe to share across connections
because it holds no per-call state besides the pooled httpx.AsyncClient.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import anyio
import httpx

from ..config import (
    WORKFLOW_DEV_PASSWORD,
    WORKFLOW_DEV_URL,
    WORKFLOW_DEV_USERNAME,
    WORKFLOW_PROD_PASSWORD,
    WORKFLOW_PROD_URL,
    WORKFLOW_PROD_USERNAME,
    WORKFLOW_TIMEOUT_S,
)
from ..errors import classify_error
from .models import WebhookEnvironment, WorkflowResult

logger = logging.getLogger(__name__)


def default_environments() -> dict[str, WebhookEnvironment]:
    """Build the dev/prod environments from process configuration."""
    return {
        "dev": WebhookEnvironment("dev", WORKFLOW_DEV_URL, WORKFLOW_DEV_USERNAME, WORKFLOW_DEV_PASSWORD),
        "prod": WebhookEnvironment("prod", WORKFLOW_PROD_URL, WORKFLOW_PROD_USERNAME, WORKFLOW_PROD_PASSWORD),
    }


def _now_ms() -> int:
    return int(time.time() * 1000)


class WorkflowClient:
    """Environment-aware webhook client."""

    def __init__(
        self,
        environments: dict[str, WebhookEnvironment] | None = None,
        timeout_s: float = WORKFLOW_TIMEOUT_S,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._environments = environments if environments is not None else default_environments()
        self._timeout_s = timeout_s
        self._client = client

    @property
    def environments(self) -> dict[str, WebhookEnvironment]:
        return self._environments

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout_s)
        return self._client

    async def send_voice_command(
        self,
        text: str,
        session_id: str | None = None,
        context: dict[str, Any] | None = None,
        environment: str = "dev",
    ) -> WorkflowResult:
        """Forward user text, with the session id and context when a session is open."""
        payload = {
            "type": "voice_command",
            "text": text,
            "timestamp": _now_ms(),
            "sessionId": session_id,
            "context": context,
        }
        return await self._send(payload, environment)

    async def send_notification(
        self,
        app: str,
        title: str,
        text: str,
        environment: str = "dev",
    ) -> WorkflowResult:
        payload = {
            "type": "notification",
            "app": app,
            "title": title,
            "text": text,
        }
        return await self._send(payload, environment)

    async def health_check(self, environment: str = "dev") -> bool:
        """Return True when the endpoint answers HEAD with 2xx or 405."""
        env = self._environments.get(environment)
        if env is None or not env.url:
            return False
        try:
            with anyio.fail_after(self._timeout_s):
                response = await self._ensure_client().head(env.url, auth=env.auth, timeout=self._timeout_s)
        except TimeoutError:
            logger.info("webhook health check timed out env=%s", environment)
            return False
        except httpx.HTTPError as exc:
            logger.info("webhook health check failed env=%s: %s", environment, exc)
            return False
        return response.is_success or response.status_code == 405

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _send(self, payload: dict[str, Any], environment: str) -> WorkflowResult:
        env = self._environments.get(environment)
        if env is None or not env.url:
            return WorkflowResult.failure(f"{environment}: webhook URL not configured")

        body = {key: value for key, value in payload.items() if value is not None}
        logger.info("webhook request env=%s type=%s", environment, body["type"])
        start = time.perf_counter()
        try:
            # post() buffers the full body, so the deadline covers slow responses
            with anyio.fail_after(self._timeout_s):
                response = await self._ensure_client().post(
                    env.url,
                    json=body,
                    auth=env.auth,
                    timeout=self._timeout_s,
                )
        except (httpx.TimeoutException, TimeoutError):
            logger.warning("webhook timeout env=%s after %.1fs", environment, self._timeout_s)
            return WorkflowResult.failure(f"{environment} request timed out")
        except httpx.HTTPError as exc:
            logger.warning("webhook %s error env=%s: %s", classify_error(exc), environment, exc)
            return WorkflowResult.failure(f"{environment}: {exc}")

        elapsed_ms = (time.perf_counter() - start) * 1000
        if not response.is_success:
            logger.warning(
                "webhook env=%s responded with status %s in %.0fms",
                environment,
                response.status_code,
                elapsed_ms,
            )
            return WorkflowResult.failure(f"status {response.status_code}")

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("webhook env=%s returned invalid JSON: %s", environment, exc)
            return WorkflowResult.failure(f"{environment}: invalid JSON response")
        if not isinstance(data, dict):
            return WorkflowResult.failure(f"{environment}: response body is not a JSON object")

        logger.info("webhook env=%s ok in %.0fms", environment, elapsed_ms)
        return WorkflowResult.from_body(data)


__all__ = ["WorkflowClient", "default_environments"]
