"""Shared utility functions."""

from .env import env_flag

__all__ = ["env_flag"]
