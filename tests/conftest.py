"""Pytest configuration and fixtures for all tests.

Keeps tests isolated from the developer's environment variables and from
state left in the shared in-memory store by earlier tests.
"""

import os

import pytest

from portfolio_api.main import app

# Environment variables read by portfolio_api.core.config
CONFIG_ENV_VARS = [
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "PORTFOLIO_DEFAULT_RISK_TOLERANCE",
    "PORTFOLIO_LABEL_MISSING_SYMBOLS",
]


@pytest.fixture(autouse=True)
def isolate_from_env():
    """Clear config env vars before each test and restore them afterwards."""
    original_values = {}
    for var in CONFIG_ENV_VARS:
        if var in os.environ:
            original_values[var] = os.environ.pop(var)

    yield

    for var in CONFIG_ENV_VARS:
        os.environ.pop(var, None)
    for var, value in original_values.items():
        os.environ[var] = value


@pytest.fixture(autouse=True)
def reset_store():
    """Start every test from the seeded mock store."""
    app.state.store.reset()
    yield
    app.dependency_overrides.clear()
