"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Cache (Redis, or an always-miss cache when no Redis URL is configured)
- Password hashing (bcrypt)
- Token generation (JWT)
- User store (in-memory)
"""

import secrets
from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.application.services import AuthTokenIssuer
    from src.domain.protocols.cache_protocol import CacheProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
    from src.domain.protocols.user_cache_protocol import UserCacheProtocol
    from src.domain.protocols.user_repository import UserRepository


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Renders JSON when ``LOG_FORMAT=json`` and colored console output
    otherwise. Level comes from ``LOG_LEVEL``.

    Returns:
        Logger implementing LoggerProtocol.

    Usage:
        logger = get_logger()
        logger.info("User registered", user_id=str(user.id))
    """
    from src.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.log_format == "json",
        level=settings.log_level_value,
    )


# ============================================================================
# Cache (Application-Scoped)
# ============================================================================


@lru_cache()
def get_cache() -> "CacheProtocol":
    """Get cache client singleton (app-scoped).

    Returns RedisAdapter with connection pooling when ``REDIS_URL`` is set,
    NullCache otherwise. Callers never check for a missing cache.

    Returns:
        Cache client implementing CacheProtocol.
    """
    from src.infrastructure.cache import NullCache, RedisAdapter

    settings = get_settings()
    if settings.redis_url is None:
        return NullCache()
    return RedisAdapter.from_url(
        settings.redis_url, timeout_seconds=settings.store_timeout_seconds
    )


@lru_cache()
def get_user_cache() -> "UserCacheProtocol":
    """Get user record cache singleton (app-scoped)."""
    from src.infrastructure.cache import UserCache

    return UserCache(
        cache=get_cache(),
        ttl_seconds=get_settings().user_cache_ttl_seconds,
        logger=get_logger(),
    )


# ============================================================================
# Security Services (Application-Scoped)
# ============================================================================


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (``BCRYPT_ROUNDS``, default 12).
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_login_timing_hash() -> str | None:
    """Get the hash verified on logins for unknown emails (app-scoped).

    Hashed once with the configured cost factor from a random password, so
    the unknown-email path spends the same bcrypt work as a wrong password.
    None if hashing fails.
    """
    from src.core.result import Success

    hashed = get_password_service().hash_password(secrets.token_urlsafe(32))
    return hashed.value if isinstance(hashed, Success) else None


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService signing HS256 tokens with ``SECRET_KEY`` and
    stamping ``JWT_ISSUER`` as the issuer.
    """
    from src.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(secret_key=settings.secret_key, issuer=settings.jwt_issuer)


@lru_cache()
def get_auth_token_issuer() -> "AuthTokenIssuer":
    """Get access/refresh pair issuer singleton (app-scoped)."""
    from src.application.services import AuthTokenIssuer

    settings = get_settings()
    return AuthTokenIssuer(
        token_service=get_token_service(),
        access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
        refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
    )


# ============================================================================
# User Store (Application-Scoped)
# ============================================================================


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Get user store singleton (app-scoped).

    The in-memory store keeps users for the life of the process.
    """
    from src.infrastructure.persistence.repositories import InMemoryUserRepository

    return InMemoryUserRepository()


def reset_container() -> None:
    """Drop every cached singleton, including settings."""
    for factory in (
        get_logger,
        get_cache,
        get_user_cache,
        get_password_service,
        get_login_timing_hash,
        get_token_service,
        get_auth_token_issuer,
        get_user_repository,
    ):
        factory.cache_clear()
    get_settings.cache_clear()
