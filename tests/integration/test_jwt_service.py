"""Integration tests for JWTService against real PyJWT.

Tests cover:
- Issued claims round trip
- Expiry (exclusive at iat+ttl) and not-before enforced with a frozen clock
- Validation reads the injected clock
- Algorithm confusion ("none", HS512) rejected
- Tampered payloads and signatures, wrong issuer and wrong token type rejected
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import TokenType
from src.infrastructure.security import JWTService
from tests.conftest import TEST_SECRET_KEY


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET_KEY, issuer="userauth-api")


def _assert_invalid(result) -> None:
    assert isinstance(result, Failure)
    assert result.error.code == ErrorCode.TOKEN_INVALID
    assert result.error.message == "Invalid or expired token"


@pytest.mark.integration
class TestJWTServiceIssue:
    """Test token issuance."""

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="short")

    def test_claims_round_trip(self, service):
        # Arrange
        user_id = uuid7()

        # Act
        token = service.issue_token(
            subject_id=user_id,
            email="jane@example.com",
            ttl=timedelta(minutes=30),
            token_type=TokenType.REFRESH,
        ).value
        result = service.validate_token(token)

        # Assert
        assert isinstance(result, Success)
        claims = result.value
        assert claims.subject_id == user_id
        assert claims.email == "jane@example.com"
        assert claims.issuer == "userauth-api"
        assert claims.token_type == TokenType.REFRESH
        assert claims.subject_type == "user_auth"
        assert claims.not_before == claims.issued_at
        assert claims.expires_at - claims.issued_at == timedelta(minutes=30)

    def test_each_token_has_unique_jti(self, service):
        user_id = uuid7()

        first = service.validate_token(
            service.issue_token(user_id, "a@example.com", timedelta(minutes=5)).value
        ).value
        second = service.validate_token(
            service.issue_token(user_id, "a@example.com", timedelta(minutes=5)).value
        ).value

        assert first.jti != second.jti

    def test_header_declares_hs256(self, service):
        token = service.issue_token(uuid7(), "a@example.com", timedelta(minutes=5)).value

        assert jwt.get_unverified_header(token)["alg"] == "HS256"


@pytest.mark.integration
class TestJWTServiceValidate:
    """Test rejection paths."""

    def test_expired_token_rejected(self, service):
        # Arrange
        with freeze_time("2026-01-01T00:00:00Z"):
            token = service.issue_token(uuid7(), "a@example.com", timedelta(minutes=30)).value

        # Act
        with freeze_time("2026-01-01T00:31:00Z"):
            result = service.validate_token(token)

        # Assert
        _assert_invalid(result)

    def test_token_valid_until_expiry(self, service):
        with freeze_time("2026-01-01T00:00:00Z"):
            token = service.issue_token(uuid7(), "a@example.com", timedelta(minutes=30)).value

        with freeze_time("2026-01-01T00:29:00Z"):
            assert isinstance(service.validate_token(token), Success)

    def test_expiry_boundary_is_exclusive(self, service):
        # Arrange
        with freeze_time("2026-01-01T00:00:00Z"):
            token = service.issue_token(uuid7(), "a@example.com", timedelta(seconds=60)).value

        # Act
        with freeze_time("2026-01-01T00:00:59.999Z"):
            just_before = service.validate_token(token)
        with freeze_time("2026-01-01T00:01:00Z"):
            at_expiry = service.validate_token(token)

        # Assert
        assert isinstance(just_before, Success)
        _assert_invalid(at_expiry)

    def test_validation_reads_injected_clock(self):
        # Arrange
        issued = datetime(2026, 1, 1, tzinfo=UTC)
        token = JWTService(secret_key=TEST_SECRET_KEY, clock=lambda: issued).issue_token(
            uuid7(), "a@example.com", timedelta(minutes=5)
        ).value

        # Act
        inside = JWTService(
            secret_key=TEST_SECRET_KEY, clock=lambda: issued + timedelta(minutes=4)
        ).validate_token(token)
        after = JWTService(
            secret_key=TEST_SECRET_KEY, clock=lambda: issued + timedelta(minutes=5)
        ).validate_token(token)
        before = JWTService(
            secret_key=TEST_SECRET_KEY, clock=lambda: issued - timedelta(seconds=1)
        ).validate_token(token)

        # Assert
        assert isinstance(inside, Success)
        _assert_invalid(after)
        _assert_invalid(before)

    def test_not_yet_valid_token_rejected(self):
        # Arrange
        future = datetime.now(UTC) + timedelta(hours=1)
        issuing = JWTService(secret_key=TEST_SECRET_KEY, clock=lambda: future)
        token = issuing.issue_token(uuid7(), "a@example.com", timedelta(hours=2)).value

        # Act
        result = JWTService(secret_key=TEST_SECRET_KEY).validate_token(token)

        # Assert
        _assert_invalid(result)

    def test_alg_none_rejected(self, service):
        # Arrange
        now = int(datetime.now(UTC).timestamp())
        payload = {
            "sub": str(uuid7()),
            "email": "a@example.com",
            "iat": now,
            "nbf": now,
            "exp": now + 600,
            "iss": "userauth-api",
        }
        token = jwt.encode(payload, key=None, algorithm="none")

        # Act / Assert
        _assert_invalid(service.validate_token(token))

    def test_other_hmac_algorithm_rejected(self, service):
        # Arrange
        now = int(datetime.now(UTC).timestamp())
        payload = {
            "sub": str(uuid7()),
            "email": "a@example.com",
            "iat": now,
            "nbf": now,
            "exp": now + 600,
            "iss": "userauth-api",
        }
        token = jwt.encode(payload, TEST_SECRET_KEY, algorithm="HS512")

        # Act / Assert
        _assert_invalid(service.validate_token(token))

    def test_tampered_payload_rejected(self, service):
        # Arrange
        token = service.issue_token(uuid7(), "a@example.com", timedelta(minutes=5)).value
        header, payload, signature = token.split(".")
        flipped = payload[:-2] + ("A" if payload[-2] != "A" else "B") + payload[-1]

        # Act / Assert
        _assert_invalid(service.validate_token(f"{header}.{flipped}.{signature}"))

    def test_tampered_signature_rejected(self, service):
        # Arrange
        token = service.issue_token(uuid7(), "a@example.com", timedelta(minutes=5)).value
        header, payload, signature = token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

        # Act / Assert
        _assert_invalid(service.validate_token(f"{header}.{payload}.{flipped}"))

    def test_wrong_secret_rejected(self, service):
        other = JWTService(secret_key="another-secret-key-of-at-least-32-bytes!")
        token = other.issue_token(uuid7(), "a@example.com", timedelta(minutes=5)).value

        _assert_invalid(service.validate_token(token))

    def test_wrong_issuer_rejected(self, service):
        other = JWTService(secret_key=TEST_SECRET_KEY, issuer="someone-else")
        token = other.issue_token(uuid7(), "a@example.com", timedelta(minutes=5)).value

        _assert_invalid(service.validate_token(token))

    def test_expected_type_mismatch_rejected(self, service):
        # Arrange
        token = service.issue_token(
            uuid7(), "a@example.com", timedelta(minutes=5), token_type=TokenType.REFRESH
        ).value

        # Act / Assert
        _assert_invalid(service.validate_token(token, TokenType.ACCESS))
        assert isinstance(service.validate_token(token, TokenType.REFRESH), Success)

    @pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
    def test_garbage_rejected(self, service, token):
        _assert_invalid(service.validate_token(token))
