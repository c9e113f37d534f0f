"""ListUsers query handler."""

from src.application.dtos.user_dtos import UserPage
from src.application.queries.user_queries import ListUsers
from src.application.services import run_store_operation
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class ListUsersHandler:
    """Handler for ListUsers query.

    Returns one page of users in creation order with pagination metadata.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        logger: LoggerProtocol,
        store_timeout: float = 5.0,
    ) -> None:
        self._user_repo = user_repo
        self._logger = logger
        self._store_timeout = store_timeout

    async def handle(self, query: ListUsers) -> Result[UserPage, DomainError]:
        listed = await run_store_operation(
            "list_users",
            self._user_repo.list_users(query.offset, query.limit),
            timeout=self._store_timeout,
            logger=self._logger,
        )
        if isinstance(listed, Failure):
            return listed

        users, total = listed.value
        return Success(
            value=UserPage(users=users, page=query.page, limit=query.limit, total=total)
        )
