"""Connection, session and websocket handlers.

This package provides the infrastructure for handling client connections:

connections.py:
    Registry of live websocket connections keyed by client id.
    Direct send and broadcast with best-effort delivery.

passwords.py:
    Shared-secret storage backing the websocket authentication gate.

session/:
    Conversation session state:
    - Session lifecycle and expiry (manager.py)
    - Periodic expiry task (sweep.py)

websocket/:
    WebSocket message handling and lifecycle:
    - Per-connection authentication gate and REST API key (auth.py)
    - Frame parsing and validation (parser.py)
    - Error event helpers (errors.py)
    - Safe send utilities (helpers.py)
    - Disconnect classification (disconnects.py)
    - Main connection handler (manager.py)
"""
