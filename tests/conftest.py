"""
- Keep tests off the network: force the local shuffle for secrets
- Provide a fresh in-memory GameStore per test and override FastAPI's
  get_store so routes use it.
- Provide a client fixture (TestClient(app)) that already has the override applied.
"""
import os
import pytest

from fastapi.testclient import TestClient

# Must be set before the app module builds its store
os.environ["COWS_BULLS_RANDOM_SOURCE"] = "local"

from cows_bulls.config import Settings
from cows_bulls.main import app, get_store
from cows_bulls.store import GameStore


@pytest.fixture
def store() -> GameStore:
    return GameStore(Settings(random_source="local"))


@pytest.fixture(autouse=True)
def override_dep(store):
    """Force the app to use our per-test store for every request."""
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    # This client talks to the FastAPI app in-process
    return TestClient(app)
