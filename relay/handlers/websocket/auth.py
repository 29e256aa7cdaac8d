"""Authentication for websocket clients and REST callers.

Websocket clients authenticate in-band: each connection owns an AuthGate
that starts Unauthenticated and only lets ``ping`` and ``auth`` through
until the shared secret has been presented. REST callers authenticate with
an API key (header or query parameter) when RELAY_API_KEY is configured.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, Security
from fastapi.security.api_key import APIKeyHeader, APIKeyQuery

from ...config import RELAY_API_KEY
from ...messages.outbound import auth_response_event, change_password_response_event
from ..passwords import PasswordStore

logger = logging.getLogger(__name__)

# Event types accepted before authentication
_OPEN_MESSAGE_TYPES = frozenset({"ping", "auth"})

# API Key can be provided via query parameter or header
api_key_query = APIKeyQuery(name="api_key", auto_error=False)
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


class AuthGate:
    """Per-connection authentication state.

    Attributes:
        authenticated: Whether the shared secret has been presented.
        agent_name: Optional display name sent with ``auth``.
    """

    __slots__ = ("_passwords", "authenticated", "agent_name")

    def __init__(self, passwords: PasswordStore) -> None:
        self._passwords = passwords
        self.authenticated = False
        self.agent_name: str | None = None

    def allows(self, msg_type: str) -> bool:
        return self.authenticated or msg_type in _OPEN_MESSAGE_TYPES

    def authenticate(self, password: str, agent_name: str | None = None) -> dict[str, Any]:
        """Check the password and return the ``auth_response`` event."""
        if self._passwords.verify(password):
            self.authenticated = True
            self.agent_name = agent_name
            logger.info("client authenticated agent=%s", agent_name or "-")
            return auth_response_event(True, "Authenticated")
        logger.warning("client authentication failed")
        return auth_response_event(False, "Invalid password")

    def change_password(self, current_password: str, new_password: str) -> dict[str, Any]:
        """Rotate the shared secret; return the ``change_password_response`` event."""
        if not self._passwords.verify(current_password):
            logger.warning("password change rejected: wrong current password")
            return change_password_response_event(False, "Current password is incorrect")
        if not new_password:
            return change_password_response_event(False, "New password must not be empty")
        try:
            self._passwords.set_password(new_password)
        except OSError as exc:
            logger.error("password change failed: %s", exc)
            return change_password_response_event(False, "Could not save new password")
        return change_password_response_event(True, "Password changed")

    def revoke(self) -> None:
        self.authenticated = False
        self.agent_name = None


def validate_api_key(provided_key: str) -> bool:
    """Validate provided API key against configured key."""
    return provided_key == RELAY_API_KEY


def _select_api_key(*candidates: str | None) -> str | None:
    """Return the first non-empty API key candidate from the provided values."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


async def get_api_key(
    api_key_query: str | None = Security(api_key_query),
    api_key_header: str | None = Security(api_key_header),
) -> str | None:
    """FastAPI dependency guarding the REST push surface.

    Open when RELAY_API_KEY is unset; otherwise raises 401 for a missing or
    wrong key.
    """
    if not RELAY_API_KEY:
        return None

    provided_key = _select_api_key(api_key_header, api_key_query)
    if not provided_key:
        logger.warning("HTTP request missing API key")
        raise HTTPException(
            status_code=401, detail="API key required. Provide via 'X-API-Key' header or 'api_key' query parameter."
        )
    if not validate_api_key(provided_key):
        logger.warning("HTTP request invalid API key")
        raise HTTPException(status_code=401, detail="Invalid API key.")
    return provided_key


__all__ = [
    "AuthGate",
    "get_api_key",
    "validate_api_key",
]
