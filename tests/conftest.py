"""
Pytest fixtures for the orbit test suite.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app as orbit_app


@pytest.fixture
def app():
    """Orbit API with an empty trajectory collection."""
    orbit_app.state.trajectories.clear()
    yield orbit_app
    orbit_app.state.trajectories.clear()


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)
