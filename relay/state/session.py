"""Session-scoped dataclasses for conversation state.

ConversationSession:
    A bounded multi-turn exchange between one client and the automation
    backend. It is correlated with its client connection only through the
    ``client_id`` string; the connection may disappear independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

InitiatedBy = Literal["user", "system"]
EndReason = Literal["user_request", "agent_decision", "timeout", "system"]


@dataclass(slots=True)
class ConversationSession:
    """One open conversation.

    Attributes:
        id: Unique identifier (uuid4 string) generated at creation.
        client_id: Identifier of the owning client connection.
        started_at: Epoch milliseconds when the session was created.
        last_activity_at: Epoch milliseconds of the latest turn; drives expiry.
        initiated_by: ``user`` for wake-word sessions, ``system`` for
            sessions pushed by the automation backend.
        context: Opaque bag forwarded verbatim to the backend on every turn.
    """

    id: str
    client_id: str
    started_at: int
    last_activity_at: int
    initiated_by: InitiatedBy
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "clientId": self.client_id,
            "startedAt": self.started_at,
            "lastActivityAt": self.last_activity_at,
            "initiatedBy": self.initiated_by,
        }
        if self.context is not None:
            payload["context"] = self.context
        return payload


__all__ = ["ConversationSession", "InitiatedBy", "EndReason"]
