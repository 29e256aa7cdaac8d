"""Conversation session bookkeeping.

SessionManager owns every open conversation session and keeps two indices:

1. Sessions by id (the records themselves)
2. Session ids by owning client id

It implements the session lifecycle used by the message router, the REST
push surface and the periodic sweeper:

- Creating sessions (user-initiated wake word or system-initiated push)
- Resolving the client's active session (freshest ``last_activity_at``)
- Refreshing activity on every turn
- Ending sessions individually, per client, or on inactivity expiry

All operations are total over their inputs: unknown ids produce ``None``
or an empty list, never an exception. Each method holds the manager lock
for its whole body, so it is atomic with respect to the maps; there is no
atomicity across calls.
"""

from __future__ import annotations

import logging
import threading
import time
import uuid
from collections.abc import Callable
from typing import Any

from ...config import SESSION_TIMEOUT_S
from ...state.session import ConversationSession, EndReason, InitiatedBy

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class SessionManager:
    """Stores open sessions and expires idle ones.

    Attributes:
        timeout_ms: Inactivity threshold in milliseconds.
    """

    def __init__(
        self,
        timeout_s: float = SESSION_TIMEOUT_S,
        *,
        now_fn: Callable[[], int] = _now_ms,
    ):
        """Initialize the session manager.

        Args:
            timeout_s: Seconds of inactivity after which a session is
                considered expired by ``cleanup_expired_sessions``.
            now_fn: Clock returning epoch milliseconds (overridable in tests).
        """
        self.timeout_ms = int(timeout_s * 1000)
        self._now = now_fn
        self._sessions: dict[str, ConversationSession] = {}  # session_id -> session
        self._by_client: dict[str, set[str]] = {}  # client_id -> session ids
        self._lock = threading.Lock()

    # ============================================================================
    # Creation / lookup
    # ============================================================================
    def create_session(
        self,
        client_id: str,
        initiated_by: InitiatedBy,
        context: dict[str, Any] | None = None,
    ) -> ConversationSession:
        now = self._now()
        session = ConversationSession(
            id=str(uuid.uuid4()),
            client_id=client_id,
            started_at=now,
            last_activity_at=now,
            initiated_by=initiated_by,
            context=context,
        )
        with self._lock:
            self._sessions[session.id] = session
            self._by_client.setdefault(client_id, set()).add(session.id)
        logger.info(
            "session created session_id=%s client_id=%s initiated_by=%s",
            session.id,
            client_id,
            initiated_by,
        )
        return session

    def get_session(self, session_id: str) -> ConversationSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def get_active_session_for_client(self, client_id: str) -> ConversationSession | None:
        """Return the client's most recently active session, if any."""
        with self._lock:
            session_ids = self._by_client.get(client_id)
            if not session_ids:
                return None
            candidates = [self._sessions[sid] for sid in session_ids if sid in self._sessions]
        if not candidates:
            return None
        return max(candidates, key=lambda s: (s.last_activity_at, s.started_at))

    def has_active_session(self, client_id: str) -> bool:
        with self._lock:
            return bool(self._by_client.get(client_id))

    def get_all_sessions(self) -> list[ConversationSession]:
        with self._lock:
            return list(self._sessions.values())

    def update_activity(self, session_id: str) -> None:
        """Bump ``last_activity_at`` to now; unknown ids are ignored."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                session.last_activity_at = self._now()

    # ============================================================================
    # Termination
    # ============================================================================
    def end_session(self, session_id: str, reason: EndReason) -> ConversationSession | None:
        """Remove a session from both indices and return it.

        ``reason`` is only logged; it never changes what happens here.
        """
        with self._lock:
            session = self._pop_locked(session_id)
        if session is not None:
            logger.info("session ended session_id=%s reason=%s", session_id, reason)
        return session

    def end_sessions_for_client(self, client_id: str, reason: EndReason) -> list[ConversationSession]:
        with self._lock:
            session_ids = list(self._by_client.get(client_id, ()))
            ended = [s for s in (self._pop_locked(sid) for sid in session_ids) if s is not None]
        for session in ended:
            logger.info("session ended session_id=%s reason=%s", session.id, reason)
        return ended

    def cleanup_expired_sessions(self) -> list[tuple[str, str]]:
        """End every session idle longer than the timeout.

        Returns:
            ``(session_id, client_id)`` pairs for each removed session.
        """
        now = self._now()
        with self._lock:
            expired_ids = [
                sid
                for sid, session in self._sessions.items()
                if now - session.last_activity_at > self.timeout_ms
            ]
            expired: list[tuple[str, str]] = []
            for sid in expired_ids:
                session = self._pop_locked(sid)
                if session is not None:
                    expired.append((session.id, session.client_id))
        if expired:
            logger.info("session sweep: expired %s session(s)", len(expired))
        return expired

    def _pop_locked(self, session_id: str) -> ConversationSession | None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None
        client_sessions = self._by_client.get(session.client_id)
        if client_sessions is not None:
            client_sessions.discard(session_id)
            if not client_sessions:
                del self._by_client[session.client_id]
        return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["SessionManager"]
