"""Refresh Access Token handler.

Flow:
1. Validate the refresh token (signature, expiry, issuer)
2. Load the user named by the token subject
3. Verify user exists and is active
4. Issue a new access + refresh pair
5. Return Success(AuthResult)

The presented refresh token stays valid until it expires; there is no
revocation list.
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import AuthResult
from src.application.services import AuthTokenIssuer, run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.enums import TokenType
from src.domain.protocols import (
    LoggerProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class RefreshError:
    """Refresh-specific error messages."""

    USER_NOT_FOUND = "User not found"
    USER_INACTIVE = "User account is inactive"


class RefreshAccessTokenHandler:
    """Handler for refresh command.

    Args:
        user_repo: User store.
        token_service: Token validator.
        token_issuer: Access/refresh pair issuer.
        logger: Structured logger.
        store_timeout: Deadline in seconds for each store call.
        enforce_token_types: Accept only tokens typed as refresh tokens.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenGenerationProtocol,
        token_issuer: AuthTokenIssuer,
        logger: LoggerProtocol,
        store_timeout: float = 5.0,
        enforce_token_types: bool = False,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._token_issuer = token_issuer
        self._logger = logger
        self._store_timeout = store_timeout
        self._enforce_token_types = enforce_token_types

    async def handle(self, cmd: RefreshAccessToken) -> Result[AuthResult, DomainError]:
        """Handle refresh command.

        Returns:
            Success(AuthResult) with a new pair.
            Failure with TOKEN_INVALID, USER_NOT_FOUND, ACCOUNT_INACTIVE or an
            internal failure.
        """
        # Step 1: Validate token
        expected_type = TokenType.REFRESH if self._enforce_token_types else None
        validated = self._token_service.validate_token(cmd.refresh_token, expected_type)
        if isinstance(validated, Failure):
            self._logger.info("Token refresh failed", reason="token_invalid")
            return validated
        claims = validated.value

        # Step 2: Load user
        found = await run_store_operation(
            "get_by_id",
            self._user_repo.get_by_id(claims.subject_id),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(found, Failure):
            return found

        # Step 3: Verify user
        user = found.value
        if user is None:
            self._logger.info(
                "Token refresh failed",
                reason="user_not_found",
                user_id=str(claims.subject_id),
            )
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=RefreshError.USER_NOT_FOUND,
                    resource_type="User",
                    resource_id=str(claims.subject_id),
                )
            )
        if not user.is_active:
            self._logger.info(
                "Token refresh failed", reason="account_inactive", user_id=str(user.id)
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=RefreshError.USER_INACTIVE,
                )
            )

        # Step 4: Issue new pair
        tokens = self._token_issuer.issue_pair(user)
        if isinstance(tokens, Failure):
            self._logger.error("Token signing failed", user_id=str(user.id))
            return tokens

        self._logger.info("Tokens refreshed", user_id=str(user.id))
        return Success(value=AuthResult(user=user, tokens=tokens.value))
