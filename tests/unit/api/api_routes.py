"""Unit tests for the REST push surface and health endpoints."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import relay.handlers.websocket.auth as auth_mod
from relay.handlers.passwords import PasswordStore
from relay.runtime import RuntimeDeps, build_runtime_deps
from relay.server import create_app
from tests.support.fakes import FakeWorkflow


@pytest.fixture
def deps(tmp_path: Path) -> RuntimeDeps:
    return build_runtime_deps(
        password_store=PasswordStore(tmp_path / "pw", default_password="pw"),
        workflow=FakeWorkflow(),
    )


@pytest.fixture
def client(deps: RuntimeDeps):
    with TestClient(create_app(deps)) as test_client:
        yield test_client


def test_root_lists_endpoints(client: TestClient) -> None:
    body = client.get("/").json()
    assert body["endpoints"]["websocket"] == "/ws"


def test_health_reports_counts(client: TestClient, deps: RuntimeDeps) -> None:
    deps.sessions.create_session("phone", "user")
    for path in ("/health", "/healthz"):
        body = client.get(path).json()
        assert body["status"] == "ok"
        assert body["mockMode"] is False
        assert body["connections"] == 0
        assert body["activeSessions"] == 1


def test_speak_requires_text(client: TestClient) -> None:
    response = client.post("/api/speak", json={"text": ""})
    assert response.status_code == 400
    assert response.json() == {"success": False, "clientsReached": 0, "error": "text is required"}


def test_speak_without_clients(client: TestClient) -> None:
    body = client.post("/api/speak", json={"text": "hola"}).json()
    assert body == {"success": False, "clientsReached": 0, "error": "No clients connected"}


def test_speak_start_conversation_reaches_connected_client(client: TestClient, deps: RuntimeDeps) -> None:
    with client.websocket_connect("/ws?clientId=phone") as ws:
        body = client.post(
            "/api/speak",
            json={"text": "¿Hablamos?", "clientId": "phone", "startConversation": True, "context": {"k": 1}},
        ).json()
        frame = ws.receive_json()

    assert body["success"] is True
    assert body["clientsReached"] == 1
    assert frame["type"] == "start_conversation"
    assert frame["sessionId"] == body["sessionId"]
    assert frame["context"] == {"k": 1}


def test_end_conversation_defaults_to_agent_decision(client: TestClient, deps: RuntimeDeps) -> None:
    session = deps.sessions.create_session("phone", "system")

    body = client.post("/api/end-conversation", json={"sessionId": session.id}).json()

    assert body == {"success": True, "endedCount": 1}
    assert deps.sessions.get_session(session.id) is None
    assert client.post("/api/end-conversation", json={"sessionId": session.id}).json()["success"] is False


def test_broadcast_requires_text(client: TestClient) -> None:
    assert client.post("/api/broadcast", json={"speak": True}).status_code == 400


def test_sessions_and_clients_listing(client: TestClient, deps: RuntimeDeps) -> None:
    with client.websocket_connect("/ws?clientId=phone"):
        session = deps.sessions.create_session("phone", "user")
        sessions_body = client.get("/api/sessions").json()
        clients_body = client.get("/api/clients").json()

    assert sessions_body["totalClients"] == 1
    assert sessions_body["sessions"][0]["id"] == session.id
    assert clients_body["count"] == 1
    assert clients_body["clients"][0]["id"] == "phone"
    assert clients_body["clients"][0]["hasActiveSession"] is True
    assert clients_body["clients"][0]["activeSession"]["clientId"] == "phone"


def test_api_key_required_when_configured(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(auth_mod, "RELAY_API_KEY", "k3y")

    assert client.get("/api/sessions").status_code == 401
    assert client.get("/api/sessions", headers={"X-API-Key": "k3y"}).status_code == 200
    assert client.get("/api/sessions?api_key=k3y").status_code == 200
    assert client.get("/health").status_code == 200


def test_shutdown_closes_workflow(deps: RuntimeDeps) -> None:
    with TestClient(create_app(deps)):
        assert deps.sweeper.running
    assert not deps.sweeper.running
    assert deps.workflow.closed is True
