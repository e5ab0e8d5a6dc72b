"""Strava integration."""

from .client import StravaClient, authorization_url

__all__ = ["StravaClient", "authorization_url"]
