"""Web API for coach."""

from .app import create_app

__all__ = ["create_app"]
