"""Machine-readable error codes.

Codes follow ENTITY_ACTION_REASON naming. Each code maps to exactly one HTTP
status in the presentation layer (see ErrorResponseBuilder), so the code is
the single source of truth for how a failure surfaces to clients.

Categories:
- Validation errors (VALIDATION_FAILED)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, UNAUTHORIZED, ACCOUNT_INACTIVE)
- Internal failures (PERSISTENCE_*, HASHING_*, SIGNING_*, MALFORMED_*)
- Rate limiting (RATE_LIMIT_EXCEEDED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    UNAUTHORIZED = "unauthorized"
    ACCOUNT_INACTIVE = "account_inactive"

    # Internal failures (never exposed verbatim)
    PERSISTENCE_FAILED = "persistence_failed"
    HASHING_FAILED = "hashing_failed"
    MALFORMED_HASH = "malformed_hash"
    SIGNING_FAILED = "signing_failed"
    CACHE_FAILED = "cache_failed"

    # Rate limiting
    RATE_LIMIT_EXCEEDED = "too_many_requests"
