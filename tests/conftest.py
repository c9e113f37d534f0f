"""Pytest configuration shared by all test suites.

Environment defaults are set before any ``src`` import: the settings
module reads them at import time and SECRET_KEY has no default.

This configuration ensures:
1. A valid secret and fast bcrypt cost for every test
2. Container singletons (user store, caches, services) are rebuilt per test
3. Helpers for building domain users without touching bcrypt
"""

import os

os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-bytes-long"
os.environ["ENVIRONMENT"] = "testing"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_RPS"] = "1000"
os.environ["RATE_LIMIT_BURST"] = "1000"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("REDIS_URL", None)

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.core.container import reset_container  # noqa: E402
from src.domain.entities.user import User  # noqa: E402

TEST_SECRET_KEY = os.environ["SECRET_KEY"]
STRONG_PASSWORD = "SecurePass123!"


@pytest.fixture(autouse=True)
def _fresh_container():
    """Drop cached singletons around every test (fresh user store)."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying LoggerProtocol."""
    return Mock()


def create_mock_user(**overrides) -> User:
    """Build an active User with a placeholder hash.

    Args:
        **overrides: Any User field.
    """
    defaults = {
        "id": uuid7(),
        "email": "jane@example.com",
        "username": "jane",
        "password_hash": "$2b$04$" + "a" * 53,
        "first_name": "Jane",
        "last_name": "Doe",
        "is_active": True,
    }
    defaults.update(overrides)
    return User(**defaults)
