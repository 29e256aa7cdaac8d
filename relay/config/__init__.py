"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- webhook: automation backend endpoints, credentials, timeout, mock mode
- sessions: conversation session timeout and sweep period
- secrets: shared password, password file, REST API key
- websocket: client id parameter and error codes
- phrases: end-of-conversation phrases and fixed farewells
- mock: canned responses for mock mode
- logging: log level and format
"""

from .webhook import (
    WORKFLOW_DEV_URL,
    WORKFLOW_DEV_USERNAME,
    WORKFLOW_DEV_PASSWORD,
    WORKFLOW_PROD_URL,
    WORKFLOW_PROD_USERNAME,
    WORKFLOW_PROD_PASSWORD,
    WORKFLOW_TIMEOUT_S,
    MOCK_MODE,
    MOCK_DELAY_S,
    START_CONVERSATION_ACTION,
)
from .sessions import SESSION_TIMEOUT_S, SESSION_SWEEP_INTERVAL_S
from .secrets import RELAY_PASSWORD, PASSWORD_FILE_PATH, RELAY_API_KEY
from .websocket import (
    WS_CLIENT_ID_PARAM,
    WS_ERROR_INVALID_MESSAGE,
    WS_ERROR_UNKNOWN_TYPE,
    WS_ERROR_NOT_AUTHENTICATED,
    WS_ERROR_WORKFLOW,
    WS_ERROR_INTERNAL,
)
from .phrases import END_CONVERSATION_PHRASES, USER_END_FAREWELL, TIMEOUT_FAREWELL
from .mock import MOCK_RESPONSES, DEFAULT_MOCK_RESPONSE, MOCK_IMPORTANT_APPS

__all__ = [
    # webhook
    "WORKFLOW_DEV_URL",
    "WORKFLOW_DEV_USERNAME",
    "WORKFLOW_DEV_PASSWORD",
    "WORKFLOW_PROD_URL",
    "WORKFLOW_PROD_USERNAME",
    "WORKFLOW_PROD_PASSWORD",
    "WORKFLOW_TIMEOUT_S",
    "MOCK_MODE",
    "MOCK_DELAY_S",
    "START_CONVERSATION_ACTION",
    # sessions
    "SESSION_TIMEOUT_S",
    "SESSION_SWEEP_INTERVAL_S",
    # secrets
    "RELAY_PASSWORD",
    "PASSWORD_FILE_PATH",
    "RELAY_API_KEY",
    # websocket
    "WS_CLIENT_ID_PARAM",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_UNKNOWN_TYPE",
    "WS_ERROR_NOT_AUTHENTICATED",
    "WS_ERROR_WORKFLOW",
    "WS_ERROR_INTERNAL",
    # phrases
    "END_CONVERSATION_PHRASES",
    "USER_END_FAREWELL",
    "TIMEOUT_FAREWELL",
    # mock
    "MOCK_RESPONSES",
    "DEFAULT_MOCK_RESPONSE",
    "MOCK_IMPORTANT_APPS",
]
