"""Fixtures for HTTP tests through the full middleware stack."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.main import create_app
from tests.conftest import STRONG_PASSWORD

API = "/api/v1"


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Client for a freshly built app (empty user store)."""
    with TestClient(create_app()) as test_client:
        yield test_client


def register(
    client: TestClient,
    email: str = "jane@example.com",
    username: str = "jane",
    password: str = STRONG_PASSWORD,
    **extra,
):
    """POST /auth/register and return the response."""
    return client.post(
        f"{API}/auth/register",
        json={"email": email, "username": username, "password": password, **extra},
    )


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def registered(client: TestClient) -> dict:
    """Registration payload (user + tokens) for jane@example.com."""
    response = register(client, first_name="Jane", last_name="Doe")
    assert response.status_code == 201
    return response.json()["data"]
