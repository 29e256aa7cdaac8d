"""End-of-conversation intent heuristic."""

from __future__ import annotations

from ..config import END_CONVERSATION_PHRASES


def detect_end_conversation_intent(text: str) -> bool:
    """Return True when any end phrase occurs in ``text`` (case-insensitive).

    Plain substring matching: "adiosas" matches "adios" as well.
    """
    lowered = text.lower()
    return any(phrase in lowered for phrase in END_CONVERSATION_PHRASES)


__all__ = ["detect_end_conversation_intent"]
