"""Shared-secret storage for websocket authentication.

The secret is the relay's only durable state. It is read from the password
file when present, otherwise from RELAY_PASSWORD; a successful
``change_password`` rewrites the file so the new secret survives restarts.
"""

from __future__ import annotations

import hmac
import logging
from pathlib import Path

from ..config import PASSWORD_FILE_PATH, RELAY_PASSWORD

logger = logging.getLogger(__name__)


class PasswordStore:
    """Holds the live shared secret and persists changes to disk."""

    def __init__(
        self,
        path: str | Path = PASSWORD_FILE_PATH,
        default_password: str | None = RELAY_PASSWORD,
    ) -> None:
        self._path = Path(path)
        self._password = self._load(default_password)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self, default_password: str | None) -> str:
        if self._path.is_file():
            stored = self._path.read_text(encoding="utf-8").strip()
            if stored:
                logger.info("relay password loaded from %s", self._path)
                return stored
        if default_password:
            return default_password
        raise RuntimeError(
            f"No relay password configured: set RELAY_PASSWORD or create {self._path}"
        )

    def verify(self, candidate: str) -> bool:
        return hmac.compare_digest(candidate.encode("utf-8"), self._password.encode("utf-8"))

    def set_password(self, new_password: str) -> None:
        """Replace the secret and write it to the password file.

        Raises:
            ValueError: If ``new_password`` is empty.
            OSError: If the file cannot be written; the old secret stays live.
        """
        if not new_password:
            raise ValueError("new password must not be empty")
        self._path.write_text(new_password, encoding="utf-8")
        self._password = new_password
        logger.info("relay password updated in %s", self._path)


__all__ = ["PasswordStore"]
