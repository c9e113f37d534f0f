"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Random per-hash salt, configurable cost (default 12)
    - Constant-time verification (bcrypt.checkpw)
    - bcrypt ignores input past 72 bytes; such passwords are refused at
      validation and never verify here

Performance:
    - Cost factor is logarithmic: each +1 doubles computation time
    - 10 = ~60ms, 12 = ~250ms, 14 = ~1s
"""

import re

import bcrypt

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecurityError
from src.domain.validators import BCRYPT_MAX_PASSWORD_BYTES

# $2a$/$2b$/$2x$/$2y$, two-digit cost, 22-char salt + 31-char digest
_BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()

        match password_service.hash_password("SecurePass123!"):
            case Success(value=password_hash):
                ...

        result = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Tests use 4.

        Raises:
            ValueError: If cost_factor is outside bcrypt's range (4-31).
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        """Configured bcrypt cost."""
        return self._cost_factor

    def hash_password(self, password: str) -> Result[str, SecurityError]:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Success with the 60-character hash ($2b$<cost>$<salt><digest>),
            or Failure(HASHING_FAILED) if salt generation or hashing fails.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> first = service.hash_password("SecurePass123!").value
            >>> second = service.hash_password("SecurePass123!").value
            >>> first != second  # Different salts
            True
        """
        try:
            salt = bcrypt.gensalt(rounds=self._cost_factor)
            password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        except (ValueError, OSError) as e:
            return Failure(
                error=SecurityError(
                    code=ErrorCode.HASHING_FAILED,
                    message="Password hashing failed",
                    details={"error_type": type(e).__name__},
                )
            )

        return Success(value=password_hash.decode("utf-8"))

    def verify_password(
        self, password: str, password_hash: str
    ) -> Result[bool, SecurityError]:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored bcrypt hash.

        Returns:
            Success(True) on match, Success(False) on mismatch,
            Failure(MALFORMED_HASH) if password_hash is not a bcrypt hash.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> password_hash = service.hash_password("SecurePass123!").value
            >>> service.verify_password("SecurePass123!", password_hash).value
            True
            >>> service.verify_password("WrongPassword1!", password_hash).value
            False
        """
        if not _BCRYPT_HASH_PATTERN.match(password_hash):
            return Failure(
                error=SecurityError(
                    code=ErrorCode.MALFORMED_HASH,
                    message="Stored password hash is not a bcrypt hash",
                )
            )

        password_bytes = password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            return Success(value=False)

        try:
            # bcrypt.checkpw does constant-time comparison
            matches = bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
        except ValueError as e:
            return Failure(
                error=SecurityError(
                    code=ErrorCode.MALFORMED_HASH,
                    message="Stored password hash could not be parsed",
                    details={"error_type": type(e).__name__},
                )
            )

        return Success(value=matches)
