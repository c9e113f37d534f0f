"""Login handler.

Flow:
1. Look up user by email
2. Reject inactive accounts
3. Verify password (worker thread, constant-time)
4. Issue access + refresh tokens
5. Return Success(AuthResult)

An unknown email and a wrong password produce the same error and message,
so responses do not reveal which emails are registered. An unknown email is
still checked against a fixed timing hash so both paths cost one bcrypt
verification.
"""

import asyncio

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import AuthResult
from src.application.services import AuthTokenIssuer, run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class LoginError:
    """Login-specific error messages."""

    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_INACTIVE = "User account is inactive"


class LoginUserHandler:
    """Handler for login command.

    Args:
        user_repo: User store.
        password_service: Password verifier.
        token_issuer: Access/refresh pair issuer.
        logger: Structured logger.
        store_timeout: Deadline in seconds for each store call.
        timing_hash: Hash verified when the email is unknown (skipped if None).
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        logger: LoggerProtocol,
        store_timeout: float = 5.0,
        timing_hash: str | None = None,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._logger = logger
        self._store_timeout = store_timeout
        self._timing_hash = timing_hash

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, DomainError]:
        """Handle login command.

        Returns:
            Success(AuthResult) on valid credentials.
            Failure(AuthenticationError) with INVALID_CREDENTIALS or
            ACCOUNT_INACTIVE, or an internal failure.
        """
        # Step 1: Look up user
        found = await run_store_operation(
            "get_by_email",
            self._user_repo.get_by_email(cmd.email),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(found, Failure):
            return found

        user = found.value
        if user is None:
            if self._timing_hash is not None:
                await asyncio.to_thread(
                    self._password_service.verify_password, cmd.password, self._timing_hash
                )
            self._logger.info("Login failed", reason="invalid_credentials")
            return Failure(error=_invalid_credentials())

        # Step 2: Active check
        if not user.is_active:
            self._logger.info("Login failed", reason="account_inactive", user_id=str(user.id))
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=LoginError.ACCOUNT_INACTIVE,
                )
            )

        # Step 3: Verify password
        verified = await asyncio.to_thread(
            self._password_service.verify_password, cmd.password, user.password_hash
        )
        match verified:
            case Failure(error=error):
                self._logger.error(
                    "Stored password hash unusable",
                    user_id=str(user.id),
                    error_code=error.code.value,
                )
                return verified
            case Success(value=False):
                self._logger.info(
                    "Login failed", reason="invalid_credentials", user_id=str(user.id)
                )
                return Failure(error=_invalid_credentials())

        # Step 4: Issue tokens
        tokens = self._token_issuer.issue_pair(user)
        if isinstance(tokens, Failure):
            self._logger.error("Token signing failed", user_id=str(user.id))
            return tokens

        self._logger.info("User logged in", user_id=str(user.id))
        return Success(value=AuthResult(user=user, tokens=tokens.value))


def _invalid_credentials() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=LoginError.INVALID_CREDENTIALS,
    )
