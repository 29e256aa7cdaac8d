#!/usr/bin/env python3
"""
Interactive live WebSocket client for a running relay.

- Connects to /ws with a client id and authenticates with the shared password
- Sends each typed line as a `voice_command` (or `chat_message` with /chat)
- Prints every event the relay sends back, including pushes from /api/*
- /end ends the active conversation, /ping checks liveness, /quit exits
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import time
import uuid
from urllib.parse import urlencode

import websockets  # type: ignore[import-not-found]

logger = logging.getLogger("live")

DEFAULT_SERVER_WS_URL = os.getenv("RELAY_WS_URL", "ws://localhost:3000/ws")

HELP = "commands: <text> | /chat <text> | /end | /ping | /prod | /quit"


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive relay WebSocket client")
    parser.add_argument("--server", default=DEFAULT_SERVER_WS_URL, help=f"WebSocket URL (default {DEFAULT_SERVER_WS_URL})")
    parser.add_argument("--client-id", default=f"live-{uuid.uuid4().hex[:8]}", help="clientId query parameter")
    parser.add_argument("--password", default=os.getenv("RELAY_PASSWORD"), help="shared password (env RELAY_PASSWORD)")
    parser.add_argument("--agent-name", default="live-client")
    args = parser.parse_args()
    if not args.password:
        parser.error("--password or RELAY_PASSWORD is required")
    return args


class LiveState:
    def __init__(self) -> None:
        self.session_id: str | None = None
        self.production = False


async def _receiver(ws, state: LiveState) -> None:
    async for raw in ws:
        event = json.loads(raw)
        kind = event.get("type")
        if kind == "start_conversation":
            state.session_id = event.get("sessionId")
        elif kind == "end_conversation" and event.get("sessionId") == state.session_id:
            state.session_id = None
        elif kind == "response" and event.get("sessionId"):
            state.session_id = event["sessionId"]
        print(f"<< {json.dumps(event, ensure_ascii=False)}")


def _frame_for(line: str, state: LiveState) -> dict | None:
    if line == "/ping":
        return {"type": "ping"}
    if line == "/end":
        if state.session_id is None:
            print("no active conversation")
            return None
        return {"type": "end_conversation", "sessionId": state.session_id}
    if line == "/prod":
        state.production = not state.production
        print(f"production={state.production}")
        return None
    msg_type = "voice_command"
    text = line
    if line.startswith("/chat "):
        msg_type = "chat_message"
        text = line[len("/chat "):]
    return {
        "type": msg_type,
        "text": text,
        "timestamp": int(time.time() * 1000),
        "production": state.production,
    }


async def _run(args: argparse.Namespace) -> None:
    url = f"{args.server}?{urlencode({'clientId': args.client_id})}"
    state = LiveState()
    async with websockets.connect(url) as ws:
        await ws.send(json.dumps({"type": "auth", "password": args.password, "agentName": args.agent_name}))
        reply = json.loads(await ws.recv())
        if not reply.get("success"):
            raise SystemExit(f"authentication failed: {reply.get('message')}")
        print(f"connected as {args.client_id}; {HELP}")

        receiver = asyncio.create_task(_receiver(ws, state))
        try:
            while True:
                line = (await asyncio.to_thread(input, ">> ")).strip()
                if not line:
                    continue
                if line == "/quit":
                    break
                frame = _frame_for(line, state)
                if frame is not None:
                    await ws.send(json.dumps(frame, ensure_ascii=False))
        finally:
            receiver.cancel()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args()
    try:
        asyncio.run(_run(args))
    except (EOFError, KeyboardInterrupt):
        pass
    except websockets.ConnectionClosed as exc:
        logger.warning("Server closed the connection (code=%s). Exiting.", getattr(exc, "code", None))


if __name__ == "__main__":
    main()
