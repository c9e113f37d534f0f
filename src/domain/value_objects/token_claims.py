"""Token claims value object.

Decoded, validated contents of a bearer token. Produced by the token
service and consumed by the bearer gate and the refresh flow.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import TokenType

SUBJECT_TYPE_USER_AUTH = "user_auth"


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenClaims:
    """Validated token claims (immutable).

    Attributes:
        subject_id: User id (``sub`` claim).
        email: User email at issuance time.
        issued_at: ``iat`` claim.
        not_before: ``nbf`` claim (equal to issued_at for issued tokens).
        expires_at: ``exp`` claim.
        issuer: ``iss`` claim.
        subject_type: Fixed subject category, ``"user_auth"``.
        token_type: ACCESS or REFRESH.
        jti: Unique token identifier.
    """

    subject_id: UUID
    email: str
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
    issuer: str
    subject_type: str = SUBJECT_TYPE_USER_AUTH
    token_type: TokenType = TokenType.ACCESS
    jti: str | None = None
