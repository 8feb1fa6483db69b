# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Points file logging at a temporary directory
# - Provides app and client fixtures for development and production
# =============================================================================

import os
import sys
import tempfile
from pathlib import Path

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="stub-user-api-logs-")
os.environ.setdefault("NODE_ENV", "development")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.logging_config import reset_logging
from app.main import create_app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_settings(tmp_path):
    """Factory for Settings that log into the test's tmp_path."""

    def _make(**overrides) -> Settings:
        values = {"LOG_DIR": str(tmp_path / "logs"), "NODE_ENV": "development"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    yield _make
    reset_logging()


@pytest.fixture
def dev_app(make_settings):
    """Application running in development mode."""
    return create_app(make_settings(NODE_ENV="development"))


@pytest.fixture
def prod_app(make_settings):
    """Application running in production mode."""
    return create_app(make_settings(NODE_ENV="production"))


@pytest.fixture
def client(dev_app):
    """Test client for the development app."""
    with TestClient(dev_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def prod_client(prod_app):
    """Test client for the production app."""
    with TestClient(prod_app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def failing_user_service():
    """A user service whose lookups always fail."""

    class FailingUserService:
        @staticmethod
        async def get_user_by_id(user_id: str):
            raise RuntimeError("database unavailable")

    return FailingUserService
