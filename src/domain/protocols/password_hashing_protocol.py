"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import SecurityError


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost (production)

    Both operations are deliberately slow. Async callers run them in a worker
    thread (``asyncio.to_thread``) so the event loop keeps serving requests.

    Usage:
        match password_service.hash_password("SecurePass123!"):
            case Success(value=password_hash):
                ...
            case Failure(error=error):
                ...
    """

    def hash_password(self, password: str) -> Result[str, SecurityError]:
        """Hash a plaintext password with a fresh random salt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success(hash) or Failure(SecurityError) with HASHING_FAILED.

        Note:
            - Same password produces different hashes (random salt)
            - NEVER log the password argument
        """
        ...

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, SecurityError]:
        """Verify a plaintext password against a stored hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            Success(True) on match, Success(False) on mismatch,
            Failure(SecurityError) with MALFORMED_HASH if the stored hash
            cannot be parsed.

        Note:
            Comparison is constant-time.
        """
        ...
