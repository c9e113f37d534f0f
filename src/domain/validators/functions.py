"""Centralized validation functions.

All validation logic is defined once and reused through the Annotated types
in ``src.domain.types``. Validators are pure functions that raise ValueError
on failure; Pydantic turns that into a field error.
"""

import re

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase, surrounding whitespace stripped).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    candidate = v.strip()
    if not EMAIL_PATTERN.match(candidate):
        raise ValueError("Invalid email format")
    return candidate.lower()


def validate_username(v: str) -> str:
    """Validate username characters.

    Raises:
        ValueError: If the username contains characters outside [A-Za-z0-9_.-].
    """
    if not USERNAME_PATTERN.match(v):
        raise ValueError(
            "Username may only contain letters, digits, '_', '.' and '-'"
        )
    return v


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Requirements:
        - 8 to 72 bytes (UTF-8)
        - At least one uppercase letter, lowercase letter and digit
        - At least one special (non-alphanumeric, non-space) character

    Returns:
        Password unchanged (validation only).

    Raises:
        ValueError: If password doesn't meet requirements.

    Example:
        >>> validate_strong_password("SecurePass123!")
        'SecurePass123!'
        >>> validate_strong_password("weak")
        ValueError: Password must be at least 8 characters
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters")
    if len(v.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError("Password must be at most 72 bytes")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain uppercase letter")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain lowercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain digit")
    if not any(not c.isalnum() and not c.isspace() for c in v):
        raise ValueError("Password must contain special character")
    return v


def validate_optional_url(v: str | None) -> str | None:
    """Validate an optional http(s) URL (avatar links).

    Returns:
        The URL unchanged, or None.

    Raises:
        ValueError: If a value is given that is not an http(s) URL.
    """
    if v is None or v == "":
        return v
    if not v.startswith(("http://", "https://")):
        raise ValueError("URL must start with http:// or https://")
    return v
