"""Pytest configuration and fixtures."""

from unittest.mock import patch

from fastapi.testclient import TestClient
import pytest

from app.main import create_app

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def client():
    """Create test client without authentication."""
    with patch("app.core.security.settings") as mock_settings:
        mock_settings.api_key = None
        app = create_app()
        yield TestClient(app)


@pytest.fixture
def client_with_auth():
    """Client with API key configured (no default headers)."""
    with patch("app.core.security.settings") as mock_settings:
        mock_settings.api_key = "test_secret_key_12345"
        app = create_app()
        yield TestClient(app)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_sbv():
    """Sample SBV content for testing."""
    return "0:00:00.000,0:00:02.000\nHello world\n\n0:00:02.000,0:00:04.000\nGoodbye"


@pytest.fixture
def sample_vtt():
    """Expected WebVTT output for sample_sbv with the phrase ``world``."""
    return (
        "WEBVTT\n\n"
        "00:00:00.000 --> 00:00:02.000\nHello <i>world</i>\n\n"
        "00:00:02.000 --> 00:00:04.000\nGoodbye\n"
    )


def get_mock_target(function_name, target_module):
    """Get the import path for mocking a function where it is used.

    Args:
        function_name: Name of the function to mock (e.g., "sbv_to_vtt")
        target_module: Module where the function is imported and used
                      (e.g., "app.api.v1.conversion")

    Returns:
        Full patch path string
    """
    return f"{target_module}.{function_name}"
