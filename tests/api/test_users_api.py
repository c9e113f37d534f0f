"""API tests for /api/v1/users (bearer token required).

Tests cover:
- Bearer gate messages
- Profile read and update
- Paginated listing
- Get, update and delete by id, including conflicts and bad ids
"""

from datetime import timedelta

import pytest
from uuid_extensions import uuid7

from src.core.config import get_settings
from src.infrastructure.security import JWTService
from tests.api.conftest import API, auth_header, register


@pytest.mark.api
class TestBearerGate:
    """401 responses from the bearer dependency."""

    def test_missing_header(self, client):
        response = client.get(f"{API}/users/profile")

        assert response.status_code == 401
        assert response.json()["message"] == "Authorization header required"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer", "Token abc"])
    def test_malformed_header(self, client, header):
        response = client.get(f"{API}/users", headers={"Authorization": header})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid authorization header format"

    def test_invalid_token(self, client):
        response = client.get(f"{API}/users", headers=auth_header("not.a.token"))

        assert response.status_code == 401
        body = response.json()
        assert body["message"] == "Invalid or expired token"
        assert body["error"] == "unauthorized"

    def test_token_signed_with_other_key(self, client, registered):
        forged = JWTService(secret_key="x" * 40).issue_token(
            uuid7(), "jane@example.com", timedelta(minutes=5)
        )

        response = client.get(f"{API}/users/profile", headers=auth_header(forged.value))

        assert response.status_code == 401

    def test_refresh_token_accepted_when_types_not_enforced(self, client, registered):
        response = client.get(
            f"{API}/users/profile", headers=auth_header(registered["refresh_token"])
        )

        assert response.status_code == 200


@pytest.mark.api
class TestProfile:
    """GET/PUT /users/profile."""

    def test_get_profile(self, client, registered):
        # Act
        response = client.get(
            f"{API}/users/profile", headers=auth_header(registered["access_token"])
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Profile retrieved successfully"
        assert body["data"]["id"] == registered["user"]["id"]
        assert "password_hash" not in body["data"]

    def test_update_profile_partial(self, client, registered):
        # Arrange
        headers = auth_header(registered["access_token"])

        # Act
        response = client.put(
            f"{API}/users/profile",
            json={"last_name": "Smith", "avatar": "https://cdn.example.com/j.png"},
            headers=headers,
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert response.json()["message"] == "Profile updated successfully"
        assert data["first_name"] == "Jane"
        assert data["last_name"] == "Smith"
        assert data["avatar"] == "https://cdn.example.com/j.png"

        profile = client.get(f"{API}/users/profile", headers=headers).json()["data"]
        assert profile["last_name"] == "Smith"

    def test_update_profile_rejects_unknown_fields(self, client, registered):
        response = client.put(
            f"{API}/users/profile",
            json={"is_active": False},
            headers=auth_header(registered["access_token"]),
        )

        assert response.status_code == 400

    def test_update_profile_email_conflict(self, client, registered):
        # Arrange
        register(client, email="other@example.com", username="other")

        # Act
        response = client.put(
            f"{API}/users/profile",
            json={"email": "other@example.com"},
            headers=auth_header(registered["access_token"]),
        )

        # Assert
        assert response.status_code == 409

    def test_login_uses_updated_email(self, client, registered):
        # Arrange
        client.put(
            f"{API}/users/profile",
            json={"email": "jane.new@example.com"},
            headers=auth_header(registered["access_token"]),
        )

        # Act
        response = client.post(
            f"{API}/auth/login",
            json={"email": "jane.new@example.com", "password": "SecurePass123!"},
        )

        # Assert
        assert response.status_code == 200


@pytest.mark.api
class TestListUsers:
    """GET /users."""

    def _seed(self, client, count: int) -> str:
        token = None
        for i in range(count):
            response = register(client, email=f"user{i}@example.com", username=f"user{i}")
            token = token or response.json()["data"]["access_token"]
        return token

    def test_default_page(self, client):
        # Arrange
        token = self._seed(client, 3)

        # Act
        response = client.get(f"{API}/users", headers=auth_header(token))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Users retrieved successfully"
        assert [u["username"] for u in body["data"]["users"]] == ["user0", "user1", "user2"]
        assert body["data"]["pagination"] == {"page": 1, "limit": 10, "total": 3, "total_pages": 1}

    def test_second_page(self, client):
        token = self._seed(client, 5)

        response = client.get(f"{API}/users?page=2&limit=2", headers=auth_header(token))

        data = response.json()["data"]
        assert [u["username"] for u in data["users"]] == ["user2", "user3"]
        assert data["pagination"]["total_pages"] == 3

    def test_out_of_range_values_normalized(self, client):
        token = self._seed(client, 1)

        response = client.get(f"{API}/users?page=0&limit=500", headers=auth_header(token))

        assert response.status_code == 200
        pagination = response.json()["data"]["pagination"]
        assert pagination["page"] == 1
        assert pagination["limit"] == 10

    def test_non_numeric_page_is_400(self, client):
        token = self._seed(client, 1)

        response = client.get(f"{API}/users?page=abc", headers=auth_header(token))

        assert response.status_code == 400


@pytest.mark.api
class TestUserById:
    """GET/PUT/DELETE /users/{user_id}."""

    def test_get_user(self, client, registered):
        user_id = registered["user"]["id"]

        response = client.get(
            f"{API}/users/{user_id}", headers=auth_header(registered["access_token"])
        )

        assert response.status_code == 200
        assert response.json()["message"] == "User retrieved successfully"
        assert response.json()["data"]["email"] == "jane@example.com"

    def test_get_unknown_user_is_404(self, client, registered):
        response = client.get(
            f"{API}/users/{uuid7()}", headers=auth_header(registered["access_token"])
        )

        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_invalid_id_is_400(self, client, registered, method):
        response = client.request(
            method.upper(),
            f"{API}/users/not-a-uuid",
            headers=auth_header(registered["access_token"]),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid user ID"

    def test_update_user(self, client, registered):
        # Arrange
        other = register(client, email="other@example.com", username="other").json()["data"]

        # Act
        response = client.put(
            f"{API}/users/{other['user']['id']}",
            json={"username": "renamed"},
            headers=auth_header(registered["access_token"]),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "User updated successfully"
        assert response.json()["data"]["username"] == "renamed"

    def test_update_username_conflict(self, client, registered):
        other = register(client, email="other@example.com", username="other").json()["data"]

        response = client.put(
            f"{API}/users/{other['user']['id']}",
            json={"username": "jane"},
            headers=auth_header(registered["access_token"]),
        )

        assert response.status_code == 409

    def test_update_unknown_user_is_404(self, client, registered):
        response = client.put(
            f"{API}/users/{uuid7()}",
            json={"first_name": "X"},
            headers=auth_header(registered["access_token"]),
        )

        assert response.status_code == 404

    def test_delete_user(self, client, registered):
        # Arrange
        headers = auth_header(registered["access_token"])
        user_id = registered["user"]["id"]

        # Act
        response = client.delete(f"{API}/users/{user_id}", headers=headers)

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "User deleted successfully"
        assert client.get(f"{API}/users/{user_id}", headers=headers).status_code == 404
        assert client.delete(f"{API}/users/{user_id}", headers=headers).status_code == 404

    def test_deleted_user_cannot_refresh_or_login(self, client, registered):
        # Arrange
        headers = auth_header(registered["access_token"])
        client.delete(f"{API}/users/{registered['user']['id']}", headers=headers)

        # Act
        refreshed = client.post(
            f"{API}/auth/refresh", json={"refresh_token": registered["refresh_token"]}
        )
        logged_in = client.post(
            f"{API}/auth/login",
            json={"email": "jane@example.com", "password": "SecurePass123!"},
        )

        # Assert
        assert refreshed.status_code == 401
        assert logged_in.status_code == 401

    def test_access_token_outlives_deletion(self, client, registered):
        # Tokens are stateless; the gate does not consult the store
        headers = auth_header(registered["access_token"])
        client.delete(f"{API}/users/{registered['user']['id']}", headers=headers)

        response = client.get(f"{API}/users", headers=headers)

        assert response.status_code == 200

    def test_enforced_token_types_reject_refresh_token(self, client, registered, monkeypatch):
        # Arrange
        monkeypatch.setenv("ENFORCE_TOKEN_TYPES", "true")
        get_settings.cache_clear()

        # Act
        response = client.get(
            f"{API}/users/profile", headers=auth_header(registered["refresh_token"])
        )

        # Assert
        assert response.status_code == 401
