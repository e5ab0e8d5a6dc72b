"""Hevy integration."""

from .client import HevyClient

__all__ = ["HevyClient"]
