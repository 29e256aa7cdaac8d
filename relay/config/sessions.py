"""Conversation session lifecycle configuration."""

import os


# Sessions idle longer than this are ended by the sweeper (5 minutes)
SESSION_TIMEOUT_S = float(os.getenv("SESSION_TIMEOUT_S", "300"))

# Sweep period; independent of SESSION_TIMEOUT_S
SESSION_SWEEP_INTERVAL_S = float(os.getenv("SESSION_SWEEP_INTERVAL_S", "60"))


__all__ = [
    "SESSION_TIMEOUT_S",
    "SESSION_SWEEP_INTERVAL_S",
]
