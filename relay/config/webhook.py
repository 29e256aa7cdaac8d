"""Automation backend webhook configuration.

Two environments are configured independently so identical event shapes can
be routed to a staging or a production automation backend:

    dev:  WORKFLOW_DEV_URL,  WORKFLOW_DEV_USERNAME,  WORKFLOW_DEV_PASSWORD
    prod: WORKFLOW_PROD_URL, WORKFLOW_PROD_USERNAME, WORKFLOW_PROD_PASSWORD

Username/password are optional; when a username is present the request is
sent with HTTP basic auth.

Mock Mode:
    MOCK_MODE replaces the HTTP client with a canned-response client so the
    relay can run without any automation backend. MOCK_DELAY_S simulates
    network latency for that client.
"""

from __future__ import annotations

import os

from ..helpers.env import env_flag

WORKFLOW_DEV_URL = os.getenv("WORKFLOW_DEV_URL", "http://localhost:5678/webhook-test/yarvis")
WORKFLOW_DEV_USERNAME = os.getenv("WORKFLOW_DEV_USERNAME") or None
WORKFLOW_DEV_PASSWORD = os.getenv("WORKFLOW_DEV_PASSWORD") or None

WORKFLOW_PROD_URL = os.getenv("WORKFLOW_PROD_URL", "http://localhost:5678/webhook/yarvis")
WORKFLOW_PROD_USERNAME = os.getenv("WORKFLOW_PROD_USERNAME") or None
WORKFLOW_PROD_PASSWORD = os.getenv("WORKFLOW_PROD_PASSWORD") or None

# Hard timeout for a single webhook round trip
WORKFLOW_TIMEOUT_S = float(os.getenv("WORKFLOW_TIMEOUT_S", "30"))

MOCK_MODE = env_flag("MOCK_MODE", False)
MOCK_DELAY_S = float(os.getenv("MOCK_DELAY_S", "0.5"))

# Action value a backend returns to open a system-initiated conversation
START_CONVERSATION_ACTION = "START_CONVERSATION"


__all__ = [
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
]
