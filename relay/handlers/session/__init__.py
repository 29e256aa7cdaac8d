"""Conversation session management."""

from .manager import SessionManager
from .sweep import SessionSweeper

__all__ = ["SessionManager", "SessionSweeper"]
