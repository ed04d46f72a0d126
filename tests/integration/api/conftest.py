"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from gatekeeper.presentation.api.app import API_V1_PREFIX, create_app


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def auth_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/auth"


@pytest.fixture
def app(test_settings):
    """Application wired to a throwaway SQLite file."""
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Test client that runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_payload() -> dict:
    return {"name": "Ada", "email": "ada@x.io", "password": "Str0ng!Pass"}


@pytest.fixture
def registered_user(client, auth_url, register_payload) -> dict:
    """Register the default user and return the response body."""
    response = client.post(f"{auth_url}/register", json=register_payload)
    assert response.status_code == 201
    return response.json()
