"""Centralized exception classes for the relay.

Organization:
    - validation.py: Inbound frame validation errors with error codes
    - classify.py: Exception-to-label mapping for log lines
"""

from .classify import classify_error
from .validation import ValidationError

__all__ = [
    "ValidationError",
    "classify_error",
]
