"""
Test configuration and fixtures for FastAPI URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortener_app.services.short_code_strategies import SecureShortCodeStrategy
from shortener_app.storage.url_store import URLStore

TEST_BASE_URL = "http://localhost:8080"


@pytest.fixture(scope="function")
def url_store():
    """
    Create a fresh, empty store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return URLStore(
        base_url=TEST_BASE_URL,
        strategy=SecureShortCodeStrategy(),
        short_code_length=8,
        max_retries=5
    )


@pytest.fixture(scope="function")
def client(url_store):
    """
    Create a test client over an app that serves the test store.
    This is the main fixture that tests will use.
    """
    app = create_app(store=url_store)

    with TestClient(app) as test_client:
        yield test_client
