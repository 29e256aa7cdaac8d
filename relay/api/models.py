"""Request bodies for the REST push surface."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..state.session import EndReason


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SpeakRequest(_CamelModel):
    text: str = ""
    client_id: str | None = Field(default=None, alias="clientId")
    start_conversation: bool = Field(default=False, alias="startConversation")
    context: dict[str, Any] | None = None


class EndConversationRequest(_CamelModel):
    session_id: str | None = Field(default=None, alias="sessionId")
    client_id: str | None = Field(default=None, alias="clientId")
    farewell: str | None = None
    reason: EndReason = "agent_decision"


class BroadcastRequest(_CamelModel):
    text: str = ""
    speak: bool = True


__all__ = ["BroadcastRequest", "EndConversationRequest", "SpeakRequest"]
