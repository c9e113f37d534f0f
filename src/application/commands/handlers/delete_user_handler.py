"""Delete user handler."""

from src.application.commands.user_commands import DeleteUser
from src.application.services import run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserCacheProtocol, UserRepository


class DeleteUserHandler:
    """Handler for account deletion.

    Removes the user from the store, then evicts the cached copy.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        user_cache: UserCacheProtocol,
        logger: LoggerProtocol,
        store_timeout: float = 5.0,
    ) -> None:
        self._user_repo = user_repo
        self._user_cache = user_cache
        self._logger = logger
        self._store_timeout = store_timeout

    async def handle(self, cmd: DeleteUser) -> Result[None, DomainError]:
        """Handle delete command.

        Returns:
            Success(None) once deleted.
            Failure(NotFoundError) if no such user exists.
        """
        deleted = await run_store_operation(
            "delete",
            self._user_repo.delete(cmd.user_id),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(deleted, Failure):
            return deleted
        if not deleted.value:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        await self._user_cache.delete(cmd.user_id)

        self._logger.info("User deleted", user_id=str(cmd.user_id))
        return Success(value=None)
