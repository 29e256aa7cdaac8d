"""Data types exchanged with the automation backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


@dataclass(slots=True, frozen=True)
class WebhookEnvironment:
    """One automation endpoint plus optional basic-auth credentials."""

    name: str
    url: str | None
    username: str | None = None
    password: str | None = None

    @property
    def auth(self) -> tuple[str, str] | None:
        if not self.username:
            return None
        return (self.username, self.password or "")


@dataclass(slots=True)
class WorkflowResult:
    """Normalized outcome of one webhook call.

    Failures are values, not exceptions: ``success`` is False and ``error``
    holds a short description.
    """

    success: bool
    response: str | None = None
    action: str | None = None
    params: dict[str, Any] | None = None
    end_conversation: bool = False
    farewell: str | None = None
    show: Any = None
    error: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> WorkflowResult:
        """Build a result from a 2xx JSON body; ``success`` defaults to True."""
        params = body.get("params")
        return cls(
            success=_as_flag(body.get("success", True)),
            response=body.get("response"),
            action=body.get("action"),
            params=params if isinstance(params, dict) else None,
            end_conversation=_as_flag(body.get("endConversation", False)),
            farewell=body.get("farewell"),
            show=body.get("show"),
            error=body.get("error"),
        )

    @classmethod
    def failure(cls, error: str) -> WorkflowResult:
        return cls(success=False, error=error)


__all__ = ["WebhookEnvironment", "WorkflowResult"]
