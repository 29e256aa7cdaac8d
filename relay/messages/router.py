"""Routing of decoded client events and server-initiated pushes.

MessageRouter is the only component that touches all three long-lived
services: the session manager, the connection registry and the workflow
client. Per inbound event it:

1. Resolves the client's active session and refreshes its activity
2. Short-circuits end phrases into a user-requested termination
3. Calls the automation backend in the environment the event selects
4. Emits response / action / end_conversation events in that order

Replies to inbound events go through the ``send`` callable of the
originating connection. Pushes (REST surface) go through the registry.
Authentication events never reach the router; the websocket handler's
gate consumes them.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ..config import START_CONVERSATION_ACTION, USER_END_FAREWELL, WS_ERROR_UNKNOWN_TYPE, WS_ERROR_WORKFLOW
from ..handlers.connections import ConnectionRegistry
from ..handlers.session.manager import SessionManager
from ..handlers.websocket.errors import build_error_payload
from ..logging import log_context
from ..state.session import ConversationSession, EndReason
from ..webhook.models import WorkflowResult
from .events import (
    ChatMessageEvent,
    ClientEvent,
    EndConversationEvent,
    NotificationEvent,
    PingEvent,
    VoiceCommandEvent,
)
from .intent import detect_end_conversation_intent
from .outbound import (
    action_event,
    end_conversation_event,
    pong_event,
    response_event,
    start_conversation_event,
)

logger = logging.getLogger(__name__)

SendFn = Callable[[dict[str, Any]], Awaitable[bool]]


class WorkflowBackend(Protocol):
    async def send_voice_command(
        self,
        text: str,
        session_id: str | None = None,
        context: dict[str, Any] | None = None,
        environment: str = "dev",
    ) -> WorkflowResult: ...

    async def send_notification(
        self,
        app: str,
        title: str,
        text: str,
        environment: str = "dev",
    ) -> WorkflowResult: ...

    async def health_check(self, environment: str = "dev") -> bool: ...

    async def aclose(self) -> None: ...


class MessageRouter:
    """Dispatches client events and pushes server-initiated messages."""

    def __init__(
        self,
        sessions: SessionManager,
        connections: ConnectionRegistry,
        workflow: WorkflowBackend,
    ) -> None:
        self._sessions = sessions
        self._connections = connections
        self._workflow = workflow
        self._handlers: dict[str, Callable[[str, Any, SendFn], Awaitable[None]]] = {
            PingEvent.type: self._handle_ping,
            VoiceCommandEvent.type: self._handle_text,
            ChatMessageEvent.type: self._handle_text,
            NotificationEvent.type: self._handle_notification,
            EndConversationEvent.type: self._handle_end_conversation,
        }

    @property
    def workflow(self) -> WorkflowBackend:
        return self._workflow

    async def handle(self, client_id: str, event: ClientEvent, send: SendFn) -> None:
        """Process one inbound event for ``client_id``."""
        handler = self._handlers.get(event.type)
        if handler is None:
            await send(build_error_payload(WS_ERROR_UNKNOWN_TYPE, f"Unknown message type: {event.type}"))
            return
        await handler(client_id, event, send)

    # ------------------------------------------------------------------
    # Inbound handlers
    # ------------------------------------------------------------------

    async def _handle_ping(self, client_id: str, event: PingEvent, send: SendFn) -> None:
        await send(pong_event())

    async def _handle_text(
        self,
        client_id: str,
        event: VoiceCommandEvent | ChatMessageEvent,
        send: SendFn,
    ) -> None:
        session = self._sessions.get_active_session_for_client(client_id)
        session_id = session.id if session else None
        with log_context(session_id=session_id):
            logger.info("%s env=%s text=%r", event.type, event.environment, event.text[:80])
            if session is not None:
                self._sessions.update_activity(session.id)
                if detect_end_conversation_intent(event.text):
                    self._sessions.end_session(session.id, "user_request")
                    await send(
                        end_conversation_event(session.id, reason="user_request", farewell=USER_END_FAREWELL)
                    )
                    return

            result = await self._workflow.send_voice_command(
                event.text,
                session_id,
                session.context if session else None,
                environment=event.environment,
            )
            await self._emit_workflow_result(result, session, event.speak, send)

    async def _emit_workflow_result(
        self,
        result: WorkflowResult,
        session: ConversationSession | None,
        speak: bool,
        send: SendFn,
    ) -> None:
        if not result.success:
            logger.warning("workflow call failed: %s", result.error)
            await send(build_error_payload(WS_ERROR_WORKFLOW, result.error or "Error processing command"))
            return

        if result.end_conversation and session is not None:
            await send(
                response_event(
                    result.farewell or result.response or "",
                    speak,
                    session_id=session.id,
                    show=result.show,
                )
            )
            await send(end_conversation_event(session.id, reason="agent_decision", farewell=result.farewell))
            self._sessions.end_session(session.id, "agent_decision")
            return

        if result.response:
            await send(
                response_event(
                    result.response,
                    speak,
                    session_id=session.id if session else None,
                    show=result.show,
                )
            )
        if result.action:
            await send(action_event(result.action, result.params))

    async def _handle_notification(self, client_id: str, event: NotificationEvent, send: SendFn) -> None:
        logger.info("notification env=%s app=%s title=%r", event.environment, event.app, event.title[:80])
        result = await self._workflow.send_notification(
            event.app,
            event.title,
            event.text,
            environment=event.environment,
        )
        if not result.success:
            logger.warning("notification workflow call failed: %s", result.error)
            return

        if result.action == START_CONVERSATION_ACTION:
            session = self._sessions.create_session(client_id, "system")
            await send(start_conversation_event(session.id, greeting=result.response, show=result.show))
        elif result.response:
            await send(response_event(result.response, True))
        else:
            logger.info("notification from %s needs no reply", event.app)

    async def _handle_end_conversation(self, client_id: str, event: EndConversationEvent, send: SendFn) -> None:
        ended = self._sessions.end_session(event.session_id, "user_request")
        if ended is not None:
            logger.info("client ended session %s", event.session_id)

    # ------------------------------------------------------------------
    # Server-initiated pushes
    # ------------------------------------------------------------------

    async def push_speak(
        self,
        text: str,
        client_id: str | None = None,
        start_conversation: bool = False,
        context: dict[str, Any] | None = None,
    ) -> tuple[int, str | None]:
        """Make one client (or every client) speak ``text``.

        With ``start_conversation`` a system-initiated session is opened for
        each reached client and announced with ``start_conversation``.

        Returns:
            ``(clients_reached, session_id)`` where ``session_id`` is the
            first session opened, if any.
        """
        targets = [client_id] if client_id else self._connections.client_ids()
        reached = 0
        first_session_id: str | None = None

        for target in targets:
            if not self._connections.has(target):
                continue
            if start_conversation:
                session = self._sessions.create_session(target, "system", context)
                first_session_id = first_session_id or session.id
                message = start_conversation_event(session.id, greeting=text, context=context)
            else:
                active = self._sessions.get_active_session_for_client(target) if client_id else None
                message = response_event(text, True, session_id=active.id if active else None)
            if await self._connections.send_to(target, message):
                reached += 1

        logger.info("push speak to %s client(s) text=%r", reached, text[:50])
        return reached, first_session_id

    async def push_end_conversation(
        self,
        session_id: str | None = None,
        client_id: str | None = None,
        farewell: str | None = None,
        reason: EndReason = "agent_decision",
    ) -> int:
        """End one session by id, or every session of a client, notifying the owner.

        Returns:
            Number of sessions ended.
        """
        if session_id:
            session = self._sessions.end_session(session_id, reason)
            if session is None:
                return 0
            await self._connections.send_to(
                session.client_id,
                end_conversation_event(session.id, reason=reason, farewell=farewell),
            )
            return 1

        if client_id:
            ended = self._sessions.end_sessions_for_client(client_id, reason)
            for session in ended:
                await self._connections.send_to(
                    client_id,
                    end_conversation_event(session.id, reason=reason, farewell=farewell),
                )
            return len(ended)

        return 0

    async def push_broadcast(self, text: str, speak: bool = True) -> int:
        reached = await self._connections.broadcast(response_event(text, speak))
        logger.info("push broadcast to %s client(s) text=%r", reached, text[:50])
        return reached


__all__ = ["MessageRouter", "SendFn", "WorkflowBackend"]
