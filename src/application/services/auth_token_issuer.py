"""Token pair issuance shared by register, login and refresh."""

from datetime import timedelta

from src.application.dtos.auth_dtos import AuthTokens
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.enums import TokenType
from src.domain.errors import SecurityError
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


class AuthTokenIssuer:
    """Issues an access token and a refresh token for a user.

    Args:
        token_service: Token signer.
        access_ttl: Access token lifetime.
        refresh_ttl: Refresh token lifetime.
    """

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        access_ttl: timedelta,
        refresh_ttl: timedelta,
    ) -> None:
        self._token_service = token_service
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl

    def issue_pair(self, user: User) -> Result[AuthTokens, SecurityError]:
        """Sign both tokens; fails if either signature fails."""
        access = self._token_service.issue_token(
            subject_id=user.id,
            email=user.email,
            ttl=self._access_ttl,
            token_type=TokenType.ACCESS,
        )
        if isinstance(access, Failure):
            return access

        refresh = self._token_service.issue_token(
            subject_id=user.id,
            email=user.email,
            ttl=self._refresh_ttl,
            token_type=TokenType.REFRESH,
        )
        if isinstance(refresh, Failure):
            return refresh

        return Success(
            value=AuthTokens(
                access_token=access.value,
                refresh_token=refresh.value,
                expires_in=int(self._access_ttl.total_seconds()),
            )
        )
