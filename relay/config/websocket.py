"""WebSocket-specific runtime configuration values.

Client Identity:
    WS_CLIENT_ID_PARAM: Query parameter carrying the client identifier at
        connect time. A uuid4 is generated when it is absent.

Error Codes:
    Machine-readable codes attached to outbound ``error`` events next to the
    human-readable message.
"""

from __future__ import annotations

import os

WS_CLIENT_ID_PARAM = os.getenv("WS_CLIENT_ID_PARAM", "clientId")

# ============================================================================
# Error Codes
# ============================================================================

WS_ERROR_INVALID_MESSAGE = "invalid_message"
WS_ERROR_UNKNOWN_TYPE = "unknown_message_type"
WS_ERROR_NOT_AUTHENTICATED = "not_authenticated"
WS_ERROR_WORKFLOW = "workflow_error"
WS_ERROR_INTERNAL = "internal_error"

__all__ = [
    "WS_CLIENT_ID_PARAM",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_UNKNOWN_TYPE",
    "WS_ERROR_NOT_AUTHENTICATED",
    "WS_ERROR_WORKFLOW",
    "WS_ERROR_INTERNAL",
]
