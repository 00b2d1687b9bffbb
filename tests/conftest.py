"""Pytest fixtures.

Tests never read the real process environment: every assembly runs against a
fabricated mapping.
"""

import pytest


@pytest.fixture
def base_env():
    """Minimal environment: only the required variables are set."""
    return {
        "PURSUIT_GITHUB_CLIENT_ID": "client-id",
        "PURSUIT_GITHUB_CLIENT_SECRET": "client-secret",
    }


@pytest.fixture
def full_env(base_env):
    """Every environment-sourced setting set to a non-default value."""
    return {
        **base_env,
        "PURSUIT_STATIC_DIR": "/srv/pursuit/static",
        "PURSUIT_APPROOT": "https://pursuit.purescript.org",
        "PURSUIT_HOST": "127.0.0.1",
        "PURSUIT_PORT": "8080",
        "PURSUIT_IP_FROM_HEADER": "true",
        "PURSUIT_GOOGLE_ANALYTICS_CODE": "UA-12345-1",
        "PURSUIT_DATA_DIR": "/srv/pursuit/data",
        "PURSUIT_GITHUB_AUTH_TOKEN": "ghp_mock_token_12345",
        "PURSUIT_MAX_HOOGLE_PARSE_ERRORS": "10",
        "PURSUIT_HOOGLE_DATABASE_MAX_AGE_SECONDS": "600",
        "PURSUIT_MINIMUM_COMPILER_VERSION": "0.12.0",
    }
