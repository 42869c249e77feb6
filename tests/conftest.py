"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- test_client: FastAPI TestClient for API integration tests
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from helgdagar.main import app


@pytest.fixture(scope="function")
def test_client():
    """
    Create FastAPI TestClient for the application.

    Runs the application lifespan, so configuration validation happens
    exactly as on a real startup.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    with TestClient(app) as client:
        yield client
