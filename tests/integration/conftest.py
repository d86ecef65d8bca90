"""
Fixtures for API tests: the real application and routers, with the global
container swapped for one wired to the in-memory repositories.
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client(container):
    from devconnect.main import app

    with patch("devconnect.di.container._container", container):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def register_and_login(client):
    """Register a user through the API and return (user_json, auth_headers)."""
    def _register_and_login(name: str, email: str, password: str = "password123"):
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        login = client.post("/api/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        token = login.json()["access_token"]
        return response.json(), {"Authorization": f"Bearer {token}"}
    return _register_and_login
