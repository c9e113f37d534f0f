"""Security primitive error types.

Returned by the credential hasher and token service when the underlying
crypto operation itself fails (not when a password or token is simply wrong).

Usage:
    from src.domain.errors import SecurityError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=SecurityError(
        code=ErrorCode.HASHING_FAILED,
        message="bcrypt salt generation failed",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecurityError(DomainError):
    """Hashing, hash parsing or token signing failure.

    Codes:
        HASHING_FAILED: Salt generation or hashing failed.
        MALFORMED_HASH: Stored hash is not a bcrypt hash.
        SIGNING_FAILED: Token could not be signed.

    The message may contain library detail; it is logged server-side and
    replaced by a generic message at the HTTP boundary.
    """

    pass
