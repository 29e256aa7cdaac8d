"""Conversation state types."""

from .session import ConversationSession, EndReason, InitiatedBy

__all__ = ["ConversationSession", "EndReason", "InitiatedBy"]
