"""WebSocket handler exports."""

from .auth import AuthGate, get_api_key, validate_api_key
from .manager import handle_websocket_connection

__all__ = [
    "AuthGate",
    "get_api_key",
    "validate_api_key",
    "handle_websocket_connection",
]
