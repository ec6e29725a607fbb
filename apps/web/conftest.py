"""
Pytest configuration for Django app tests.
"""

from django.test import Client as DjangoClient

import pytest
import respx

API_BASE_URL = "https://api.test"


@pytest.fixture(autouse=True)
def api_base_url(settings) -> str:
    """Point every backend client at a fake host."""
    settings.MENU_API_BASE_URL = API_BASE_URL
    return API_BASE_URL


@pytest.fixture
def backend():
    """Mocked menu backend. Unmocked calls fail the test."""
    with respx.mock(base_url=API_BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def http_client() -> DjangoClient:
    """Django test client for page requests."""
    return DjangoClient()


@pytest.fixture
def admin_client(http_client: DjangoClient, backend) -> DjangoClient:
    """Test client holding a session token the backend accepts."""
    http_client.cookies["auth-token"] = "valid-token"
    backend.get("/api/admin/Auth/checkAuth").respond(json={"isAuthenticated": True})
    return http_client
