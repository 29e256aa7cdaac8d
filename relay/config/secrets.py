"""Secrets and authentication related configuration."""

import os


# Initial shared secret for client authentication. Only consulted when the
# password file does not exist yet.
RELAY_PASSWORD = os.getenv("RELAY_PASSWORD") or None

# Plaintext file holding the live shared secret (updated by change_password)
PASSWORD_FILE_PATH = os.getenv("PASSWORD_FILE_PATH", ".relay_password")

# Optional API key guarding the REST push endpoints (/api/*)
RELAY_API_KEY = os.getenv("RELAY_API_KEY") or None


__all__ = ["RELAY_PASSWORD", "PASSWORD_FILE_PATH", "RELAY_API_KEY"]
