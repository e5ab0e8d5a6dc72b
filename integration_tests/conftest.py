"""Pytest configuration for integration tests."""

import os

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything here as integration; live API tests need credentials."""
    for item in items:
        if "integration_tests" not in str(item.fspath):
            continue
        item.add_marker(pytest.mark.integration)
        for provider, env_var in (("strava", "STRAVA_ACCESS_TOKEN"), ("hevy", "HEVY_API_KEY")):
            if item.get_closest_marker(provider) and not os.environ.get(env_var):
                item.add_marker(pytest.mark.skip(reason=f"{env_var} not set"))
