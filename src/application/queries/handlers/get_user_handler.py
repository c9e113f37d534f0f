"""GetUser query handler.

Reads through the user cache: a hit is returned as is, a miss goes to the
store and fills the cache. Cached users carry no password hash, so this
handler is only for read-only views of a user.
"""

from src.application.queries.user_queries import GetUser
from src.application.services import run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import LoggerProtocol, UserCacheProtocol, UserRepository


class GetUserHandler:
    """Handler for GetUser query.

    Args:
        user_repo: User store.
        user_cache: Read-through user cache.
        logger: Structured logger.
        store_timeout: Deadline in seconds for each store call.
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

    async def handle(self, query: GetUser) -> Result[User, DomainError]:
        """Handle GetUser query.

        Returns:
            Success(User) if found.
            Failure(NotFoundError) if the user does not exist.
        """
        cached = await self._user_cache.get(query.user_id)
        if cached is not None:
            self._logger.debug("User cache hit", user_id=str(query.user_id))
            return Success(value=cached)

        found = await run_store_operation(
            "get_by_id",
            self._user_repo.get_by_id(query.user_id),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(found, Failure):
            return found

        user = found.value
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )

        await self._user_cache.set(user)
        return Success(value=user)
