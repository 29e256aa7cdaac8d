"""REST endpoints used by automation systems to push to clients.

POST /api/speak             make one client (or all) speak, optionally opening a conversation
POST /api/end-conversation  end a session by id, or every session of a client
POST /api/broadcast         send a response event to every connected client
GET  /api/sessions          list open sessions
GET  /api/clients           list connected clients with their active session

All routes share the API-key dependency, which is a no-op unless
RELAY_API_KEY is set.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from ..handlers.websocket.auth import get_api_key
from ..runtime.dependencies import RuntimeDeps
from .models import BroadcastRequest, EndConversationRequest, SpeakRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", dependencies=[Depends(get_api_key)])


def get_runtime_deps(request: Request) -> RuntimeDeps:
    return request.app.state.deps


def _text_required() -> ORJSONResponse:
    return ORJSONResponse(
        status_code=400,
        content={"success": False, "clientsReached": 0, "error": "text is required"},
    )


@router.post("/speak")
async def speak(body: SpeakRequest, deps: RuntimeDeps = Depends(get_runtime_deps)):
    if not body.text:
        return _text_required()

    reached, session_id = await deps.router.push_speak(
        body.text,
        client_id=body.client_id,
        start_conversation=body.start_conversation,
        context=body.context,
    )
    payload: dict[str, Any] = {"success": reached > 0, "clientsReached": reached}
    if session_id:
        payload["sessionId"] = session_id
    if reached == 0:
        payload["error"] = "No clients connected"
    return payload


@router.post("/end-conversation")
async def end_conversation(
    body: EndConversationRequest,
    deps: RuntimeDeps = Depends(get_runtime_deps),
):
    ended = await deps.router.push_end_conversation(
        session_id=body.session_id,
        client_id=body.client_id,
        farewell=body.farewell,
        reason=body.reason,
    )
    logger.info("api end-conversation: ended %s session(s)", ended)
    return {"success": ended > 0, "endedCount": ended}


@router.post("/broadcast")
async def broadcast(body: BroadcastRequest, deps: RuntimeDeps = Depends(get_runtime_deps)):
    if not body.text:
        return _text_required()
    reached = await deps.router.push_broadcast(body.text, body.speak)
    return {"success": reached > 0, "clientsReached": reached}


@router.get("/sessions")
async def list_sessions(deps: RuntimeDeps = Depends(get_runtime_deps)):
    return {
        "sessions": [session.to_dict() for session in deps.sessions.get_all_sessions()],
        "totalClients": deps.connections.size,
    }


@router.get("/clients")
async def list_clients(deps: RuntimeDeps = Depends(get_runtime_deps)):
    clients = []
    for client_id in deps.connections.client_ids():
        active = deps.sessions.get_active_session_for_client(client_id)
        clients.append(
            {
                "id": client_id,
                "hasActiveSession": active is not None,
                "activeSession": active.to_dict() if active else None,
            }
        )
    return {"count": len(clients), "clients": clients}


__all__ = ["router", "get_runtime_deps"]
