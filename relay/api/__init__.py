"""REST push surface."""

from .routes import router

__all__ = ["router"]
