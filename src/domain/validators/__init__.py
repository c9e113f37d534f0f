"""Validation functions package."""

from src.domain.validators.functions import (
    BCRYPT_MAX_PASSWORD_BYTES,
    validate_email,
    validate_optional_url,
    validate_strong_password,
    validate_username,
)

__all__ = [
    "BCRYPT_MAX_PASSWORD_BYTES",
    "validate_email",
    "validate_optional_url",
    "validate_strong_password",
    "validate_username",
]
