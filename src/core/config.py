"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(case-insensitive) with an optional ``.env`` file.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Only SECRET_KEY is required; everything else has a safe default

Usage:
    from src.core.config import settings

    ttl = settings.access_token_expire_minutes

    if settings.is_development:
        # Dev-specific behavior
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Explicit keyword arguments (tests)
        2. Environment variables
        3. ``.env`` file
        4. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8080,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Log renderer: 'json' for machine parsing, 'console' for humans",
    )

    # Application metadata
    app_name: str = Field(
        default="UserAuth API",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Security configuration
    secret_key: str = Field(
        min_length=32,
        description="HMAC secret for JWT signing (at least 32 characters)",
    )
    jwt_issuer: str = Field(
        default="userauth-api",
        description="Value of the 'iss' claim written to and required in every token",
    )
    access_token_expire_minutes: int = Field(
        default=30,
        gt=0,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=7,
        gt=0,
        description="Refresh token lifetime in days",
    )
    enforce_token_types: bool = Field(
        default=False,
        description="Reject refresh tokens at the bearer gate and access tokens at refresh",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds (10-14 recommended, 12 = ~250ms)",
    )

    # Rate limiting (token bucket per client)
    rate_limit_rps: float = Field(
        default=10.0,
        gt=0,
        description="Sustained requests per second allowed per client",
    )
    rate_limit_burst: int = Field(
        default=20,
        ge=1,
        description="Bucket capacity (maximum burst) per client",
    )
    rate_limit_idle_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Evict client buckets idle for longer than this",
    )
    rate_limit_sweep_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Interval between idle-bucket sweeps",
    )
    trust_forwarded_for: bool = Field(
        default=False,
        description="Identify clients by the first X-Forwarded-For hop (behind a proxy)",
    )

    # CORS / security headers
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)",
    )
    cors_allow_credentials: bool = Field(
        default=False,
        description="Allow cookies and authentication headers in CORS requests",
    )
    hsts_enabled: bool = Field(
        default=False,
        description="Send Strict-Transport-Security (enable only behind TLS)",
    )

    # Cache (optional)
    redis_url: str | None = Field(
        default=None,
        description="Redis connection URL; caching is disabled when unset",
    )
    user_cache_ttl_seconds: int = Field(
        default=1800,
        gt=0,
        description="Lifetime of cached user profiles",
    )

    # Store
    store_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Deadline applied to every user-store call",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within bcrypt's supported range.

        Raises:
            ValueError: If rounds are not between 4 and 31.
        """
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    @field_validator("api_v1_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Remove trailing slash from the API prefix."""
        return v.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        """
        Parse comma-separated CORS origins.

        Returns:
            list[str]: List of origin URLs.
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for structlog filtering."""
        return logging.getLevelNamesMapping()[self.log_level]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env


# Global settings instance (singleton pattern)
settings = get_settings()
