"""Automation backend adapters (live webhook client and offline mock)."""

from .client import WorkflowClient, default_environments
from .mock import MockWorkflowClient
from .models import WebhookEnvironment, WorkflowResult

__all__ = [
    "MockWorkflowClient",
    "WebhookEnvironment",
    "WorkflowClient",
    "WorkflowResult",
    "default_environments",
]
