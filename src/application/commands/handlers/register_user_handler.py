"""Registration handler.

Flow:
1. Check email/username uniqueness
2. Hash password (worker thread)
3. Create active User entity and persist it
4. Issue access + refresh tokens
5. Return Success(AuthResult)

On failure:
- Duplicate email/username -> ConflictError(USER_ALREADY_EXISTS)
- Hashing/signing failure -> SecurityError
- Store failure/timeout -> PersistenceError

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (adapters are injected via protocols)
"""

import asyncio

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.application.dtos.auth_dtos import AuthResult
from src.application.services import AuthTokenIssuer, run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


class RegistrationError:
    """Registration-specific error messages."""

    USER_ALREADY_EXISTS = "User with this email or username already exists"


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_issuer: AuthTokenIssuer,
        logger: LoggerProtocol,
        store_timeout: float = 5.0,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User store.
            password_service: Password hashing service.
            token_issuer: Access/refresh pair issuer.
            logger: Structured logger.
            store_timeout: Deadline in seconds for each store call.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_issuer = token_issuer
        self._logger = logger
        self._store_timeout = store_timeout

    async def handle(self, cmd: RegisterUser) -> Result[AuthResult, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (fields validated by request schema).

        Returns:
            Success(AuthResult) on successful registration.
            Failure(DomainError) otherwise.
        """
        # Step 1: Check uniqueness
        exists = await run_store_operation(
            "exists_by_email_or_username",
            self._user_repo.exists_by_email_or_username(cmd.email, cmd.username),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        match exists:
            case Failure():
                return exists
            case Success(value=True):
                self._logger.info("Registration rejected: duplicate user")
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.USER_ALREADY_EXISTS,
                        message=RegistrationError.USER_ALREADY_EXISTS,
                        resource_type="User",
                    )
                )

        # Step 2: Hash password off the event loop
        hashed = await asyncio.to_thread(self._password_service.hash_password, cmd.password)
        if isinstance(hashed, Failure):
            self._logger.error("Password hashing failed", error_code=hashed.error.code.value)
            return hashed

        # Step 3: Create and persist user
        user = User(
            id=uuid7(),
            email=cmd.email,
            username=cmd.username,
            password_hash=hashed.value,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            is_active=True,
        )
        created = await run_store_operation(
            "create",
            self._user_repo.create(user),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(created, Failure):
            return created

        # Step 4: Issue tokens
        tokens = self._token_issuer.issue_pair(user)
        if isinstance(tokens, Failure):
            self._logger.error("Token signing failed", user_id=str(user.id))
            return tokens

        self._logger.info("User registered", user_id=str(user.id))
        return Success(value=AuthResult(user=user, tokens=tokens.value))
