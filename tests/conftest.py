"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.config import Settings  # noqa: E402
from src.contacts.store import SAMPLE_CONTACTS, ContactStore  # noqa: E402
from src.index import create_app  # noqa: E402


@pytest.fixture
def store():
    """A store seeded with the three sample contacts (ids 1-3)."""
    return ContactStore(SAMPLE_CONTACTS)


@pytest.fixture
def empty_store():
    return ContactStore()


@pytest.fixture
def api_settings():
    """Settings for API-only tests: no UI routes, no outbound client."""
    return Settings(enable_frontend=False)


@pytest.fixture
def app(api_settings, store):
    return create_app(settings=api_settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
