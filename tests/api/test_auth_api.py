"""API tests for /api/v1/auth.

Tests cover:
- Registration success, validation failures and duplicates
- Login success and indistinguishable failures
- Refresh success and rejection of invalid or expired tokens
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.core.container import get_user_repository
from src.core.enums import ErrorCode
from src.domain.enums import TokenType
from src.infrastructure.security import JWTService
from tests.api.conftest import API, auth_header, register
from tests.conftest import STRONG_PASSWORD, TEST_SECRET_KEY


@pytest.mark.api
class TestRegister:
    """POST /auth/register."""

    def test_register_success(self, client):
        # Act
        response = register(client, email="Jane@Example.com", first_name="Jane")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        data = body["data"]
        assert data["user"]["email"] == "jane@example.com"
        assert data["user"]["username"] == "jane"
        assert data["user"]["first_name"] == "Jane"
        assert data["user"]["is_active"] is True
        assert UUID(data["user"]["id"])
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 1800
        assert data["access_token"] and data["refresh_token"]

    def test_response_never_contains_password_material(self, client):
        response = register(client)

        text = response.text
        assert "password" not in text
        assert STRONG_PASSWORD not in text
        assert "$2b$" not in text

    def test_registered_access_token_works(self, client, registered):
        response = client.get(
            f"{API}/users/profile", headers=auth_header(registered["access_token"])
        )

        assert response.status_code == 200

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"email": "not-an-email", "username": "jane", "password": STRONG_PASSWORD}, "email"),
            ({"email": "jane@example.com", "username": "jane", "password": "weakpass"}, "password"),
            ({"email": "jane@example.com", "username": "", "password": STRONG_PASSWORD}, "username"),
            ({"email": "jane@example.com", "password": STRONG_PASSWORD}, "username"),
        ],
    )
    def test_invalid_payload_is_400(self, client, payload, field):
        # Act
        response = client.post(f"{API}/auth/register", json=payload)

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Invalid request data"
        assert field in {item["field"] for item in body["error"]}

    def test_malformed_json_is_400(self, client):
        response = client.post(
            f"{API}/auth/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        ("email", "username"),
        [("jane@example.com", "other"), ("other@example.com", "jane"), ("JANE@example.com", "x")],
    )
    def test_duplicate_is_409(self, client, registered, email, username):
        # Act
        response = register(client, email=email, username=username)

        # Assert
        assert response.status_code == 409
        body = response.json()
        assert body["message"] == "User already exists"
        assert body["error"] == ErrorCode.USER_ALREADY_EXISTS.value


@pytest.mark.api
class TestLogin:
    """POST /auth/login."""

    def test_login_success(self, client, registered):
        # Act
        response = client.post(
            f"{API}/auth/login",
            json={"email": "JANE@example.com", "password": STRONG_PASSWORD},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["user"]["id"] == registered["user"]["id"]
        assert body["data"]["access_token"]

    def test_wrong_password_and_unknown_email_look_identical(self, client, registered):
        # Act
        wrong_password = client.post(
            f"{API}/auth/login",
            json={"email": "jane@example.com", "password": "WrongPass123!"},
        )
        unknown_email = client.post(
            f"{API}/auth/login",
            json={"email": "nobody@example.com", "password": "WrongPass123!"},
        )

        # Assert
        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Authentication failed"

    def test_inactive_account_is_rejected(self, client, registered):
        # Arrange
        repo = get_user_repository()
        user = client.portal.call(repo.get_by_email, "jane@example.com")
        user.is_active = False
        client.portal.call(repo.update, user)

        # Act
        login = client.post(
            f"{API}/auth/login",
            json={"email": "jane@example.com", "password": STRONG_PASSWORD},
        )
        refresh = client.post(
            f"{API}/auth/refresh", json={"refresh_token": registered["refresh_token"]}
        )

        # Assert
        assert login.status_code == 401
        assert login.json()["error"] == ErrorCode.ACCOUNT_INACTIVE.value
        assert refresh.status_code == 401
        assert refresh.json()["error"] == ErrorCode.ACCOUNT_INACTIVE.value

    def test_login_does_not_strength_check_password(self, client, registered):
        response = client.post(
            f"{API}/auth/login", json={"email": "jane@example.com", "password": "x"}
        )

        assert response.status_code == 401

    def test_missing_fields_is_400(self, client):
        response = client.post(f"{API}/auth/login", json={"email": "jane@example.com"})

        assert response.status_code == 400


@pytest.mark.api
class TestRefresh:
    """POST /auth/refresh."""

    def test_refresh_returns_new_pair(self, client, registered):
        # Act
        response = client.post(
            f"{API}/auth/refresh", json={"refresh_token": registered["refresh_token"]}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Token refreshed successfully"
        assert body["data"]["user"]["id"] == registered["user"]["id"]
        assert body["data"]["refresh_token"] != registered["refresh_token"]

    def test_refresh_token_reusable_until_expiry(self, client, registered):
        payload = {"refresh_token": registered["refresh_token"]}

        first = client.post(f"{API}/auth/refresh", json=payload)
        second = client.post(f"{API}/auth/refresh", json=payload)

        assert first.status_code == second.status_code == 200

    @pytest.mark.parametrize("token", ["garbage", "a.b.c"])
    def test_invalid_token_is_401(self, client, token):
        response = client.post(f"{API}/auth/refresh", json={"refresh_token": token})

        assert response.status_code == 401
        assert response.json()["message"] == "Token refresh failed"

    def test_empty_token_is_400(self, client):
        response = client.post(f"{API}/auth/refresh", json={"refresh_token": ""})

        assert response.status_code == 400

    def test_expired_token_is_401(self, client, registered):
        # Arrange
        past = datetime.now(UTC) - timedelta(days=30)
        stale = JWTService(secret_key=TEST_SECRET_KEY, clock=lambda: past).issue_token(
            subject_id=UUID(registered["user"]["id"]),
            email="jane@example.com",
            ttl=timedelta(days=7),
            token_type=TokenType.REFRESH,
        )

        # Act
        response = client.post(f"{API}/auth/refresh", json={"refresh_token": stale.value})

        # Assert
        assert response.status_code == 401

    def test_token_for_deleted_user_is_401(self, client):
        # Arrange
        orphan = JWTService(secret_key=TEST_SECRET_KEY).issue_token(
            subject_id=uuid7(),
            email="ghost@example.com",
            ttl=timedelta(days=7),
            token_type=TokenType.REFRESH,
        )

        # Act
        response = client.post(f"{API}/auth/refresh", json={"refresh_token": orphan.value})

        # Assert
        assert response.status_code == 401
        assert response.json()["message"] == "Token refresh failed"
