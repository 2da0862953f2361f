"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.factories import thresholds


@pytest.fixture
def th():
    """Default paint thresholds (window 4h, buffer 4h, horizon 72h)."""
    return thresholds()


@pytest.fixture
def client():
    """FastAPI test client."""
    from paintwindow.main import app

    yield TestClient(app)
    app.dependency_overrides.clear()
