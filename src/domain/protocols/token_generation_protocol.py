"""Token generation protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
"""

from datetime import timedelta
from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.enums import TokenType
from src.domain.errors import SecurityError
from src.domain.value_objects import TokenClaims


class TokenGenerationProtocol(Protocol):
    """Signed bearer-token issuance and validation.

    Implementations:
        - JWTService: HS256 JWT (production)

    Tokens are self-contained: validation needs only the signing secret.
    """

    def issue_token(
        self,
        subject_id: UUID,
        email: str,
        ttl: timedelta,
        token_type: TokenType = TokenType.ACCESS,
    ) -> Result[str, SecurityError]:
        """Issue a signed token valid for ``ttl`` from now.

        Args:
            subject_id: User id written to ``sub``.
            email: User email written to ``email``.
            ttl: Lifetime; ``exp`` = now + ttl.
            token_type: ACCESS or REFRESH.

        Returns:
            Success(token) or Failure(SecurityError) with SIGNING_FAILED.
        """
        ...

    def validate_token(
        self, token: str, expected_type: TokenType | None = None
    ) -> Result[TokenClaims, AuthenticationError]:
        """Validate a token and return its claims.

        Args:
            token: Compact token string.
            expected_type: When given, tokens of another flavor are rejected.

        Returns:
            Success(TokenClaims) or Failure(AuthenticationError) with
            TOKEN_INVALID. Expired, malformed, tampered and wrong-algorithm
            tokens all produce the same error.
        """
        ...
