"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HS256 only; tokens declaring any other algorithm (including "none")
      are rejected before signature checks
    - 256-bit secret key minimum
    - exp, iat, nbf, iss and sub are required on validation
    - Issuance and validation read the same injectable clock
    - Unique JWT ID (jti) per token

Claims written:
    sub       user id
    email     user email
    iat/nbf   issuance time
    exp       iat + ttl
    iss       configured issuer
    sub_type  "user_auth"
    token_type "access" | "refresh"
    jti       UUIDv7
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.errors import SecurityError
from src.domain.value_objects import SUBJECT_TYPE_USER_AUTH, TokenClaims

_REQUIRED_CLAIMS = ["exp", "iat", "nbf", "iss", "sub"]

# Time claims are checked against the injected clock, not PyJWT's wall clock
_DECODE_OPTIONS: dict[str, Any] = {
    "require": _REQUIRED_CLAIMS,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
}

INVALID_TOKEN_ERROR = AuthenticationError(
    code=ErrorCode.TOKEN_INVALID,
    message="Invalid or expired token",
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()

        result = token_service.issue_token(
            subject_id=user.id,
            email=user.email,
            ttl=timedelta(minutes=30),
        )

        match token_service.validate_token(token):
            case Success(value=claims):
                claims.subject_id
            case Failure(error=error):
                ...
    """

    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        issuer: str = "userauth-api",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes).
            issuer: Value written to and required in the ``iss`` claim.
            clock: Current UTC time, used both to stamp issued tokens and to
                check exp, nbf and iat on validation.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key.encode("utf-8")) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._clock = clock

    def issue_token(
        self,
        subject_id: UUID,
        email: str,
        ttl: timedelta,
        token_type: TokenType = TokenType.ACCESS,
    ) -> Result[str, SecurityError]:
        """Issue a signed JWT.

        Args:
            subject_id: User id (``sub``).
            email: User email.
            ttl: Token lifetime.
            token_type: ACCESS or REFRESH.

        Returns:
            Success(token) or Failure(SIGNING_FAILED).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.issue_token(uuid7(), "a@b.co", timedelta(minutes=5)).value
            >>> len(token.split("."))
            3
        """
        now = self._clock()
        issued_at = int(now.timestamp())

        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "email": email,
            "iat": issued_at,
            "nbf": issued_at,
            "exp": int((now + ttl).timestamp()),
            "iss": self._issuer,
            "sub_type": SUBJECT_TYPE_USER_AUTH,
            "token_type": token_type.value,
            "jti": str(uuid7()),
        }

        try:
            token: str = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            return Failure(
                error=SecurityError(
                    code=ErrorCode.SIGNING_FAILED,
                    message="Token signing failed",
                    details={"error_type": type(e).__name__},
                )
            )

        return Success(value=token)

    def validate_token(
        self, token: str, expected_type: TokenType | None = None
    ) -> Result[TokenClaims, AuthenticationError]:
        """Validate a JWT and extract its claims.

        Args:
            token: JWT string.
            expected_type: Reject tokens of another flavor when given.

        Returns:
            Success(TokenClaims) or Failure(TOKEN_INVALID). The error does not
            say which check failed.

        Note:
            - Signature and iss are checked by PyJWT; exp, nbf and iat are
              checked against the injected clock (expired at exactly exp)
            - Returns Failure (not exceptions) for invalid tokens
            - Stateless (no store lookup)
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                options=_DECODE_OPTIONS,
            )
        except InvalidTokenError:
            return Failure(error=INVALID_TOKEN_ERROR)

        claims = self._to_claims(payload)
        if claims is None:
            return Failure(error=INVALID_TOKEN_ERROR)

        now = self._clock()
        if claims.expires_at <= now or claims.not_before > now or claims.issued_at > now:
            return Failure(error=INVALID_TOKEN_ERROR)

        if expected_type is not None and claims.token_type != expected_type:
            return Failure(error=INVALID_TOKEN_ERROR)

        return Success(value=claims)

    @staticmethod
    def _to_claims(payload: dict[str, Any]) -> TokenClaims | None:
        """Build TokenClaims from a verified payload; None if claims are unusable."""
        if payload.get("sub_type", SUBJECT_TYPE_USER_AUTH) != SUBJECT_TYPE_USER_AUTH:
            return None

        email = payload.get("email")
        if not isinstance(email, str):
            return None

        try:
            subject_id = UUID(str(payload["sub"]))
            token_type = TokenType(payload.get("token_type", TokenType.ACCESS.value))
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=UTC)
            not_before = datetime.fromtimestamp(int(payload["nbf"]), tz=UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=UTC)
        except (KeyError, TypeError, ValueError):
            return None

        jti = payload.get("jti")
        return TokenClaims(
            subject_id=subject_id,
            email=email,
            issued_at=issued_at,
            not_before=not_before,
            expires_at=expires_at,
            issuer=str(payload["iss"]),
            token_type=token_type,
            jti=str(jti) if jti is not None else None,
        )
