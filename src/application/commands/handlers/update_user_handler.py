"""Update user handler.

Flow:
1. Load the user
2. Reject email/username changes already held by another user
3. Apply the partial update and persist it
4. Evict the cached copy
5. Return Success(User)
"""

from collections.abc import Awaitable

from src.application.commands.user_commands import UpdateUser
from src.application.services import run_store_operation
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.protocols import LoggerProtocol, UserCacheProtocol, UserRepository


class UpdateUserHandler:
    """Handler for partial profile updates."""

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

    async def handle(self, cmd: UpdateUser) -> Result[User, DomainError]:
        """Handle update command.

        Returns:
            Success(User) with the updated record.
            Failure(NotFoundError) if the user does not exist.
            Failure(ConflictError) if the new email or username is taken.
        """
        # Step 1: Load user
        found = await self._store("get_by_id", self._user_repo.get_by_id(cmd.user_id))
        if isinstance(found, Failure):
            return found
        user = found.value
        if user is None:
            return Failure(error=_user_not_found(cmd))

        # Step 2: Uniqueness of changed identifiers
        if cmd.email is not None and cmd.email != user.email:
            holder = await self._store("get_by_email", self._user_repo.get_by_email(cmd.email))
            if isinstance(holder, Failure):
                return holder
            if holder.value is not None and holder.value.id != user.id:
                return Failure(error=_conflict("email"))

        if cmd.username is not None and cmd.username != user.username:
            holder = await self._store(
                "get_by_username", self._user_repo.get_by_username(cmd.username)
            )
            if isinstance(holder, Failure):
                return holder
            if holder.value is not None and holder.value.id != user.id:
                return Failure(error=_conflict("username"))

        # Step 3: Apply and persist
        user.update_profile(
            email=cmd.email,
            username=cmd.username,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            avatar=cmd.avatar,
        )
        updated = await self._store("update", self._user_repo.update(user))
        if isinstance(updated, Failure):
            return updated

        # Step 4: Evict cache
        await self._user_cache.delete(user.id)

        self._logger.info("User updated", user_id=str(user.id))
        return Success(value=user)

    async def _store[T](self, operation: str, call: Awaitable[T]) -> Result[T, DomainError]:
        return await run_store_operation(
            operation, call, timeout=self._store_timeout, logger=self._logger
        )


def _user_not_found(cmd: UpdateUser) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
        resource_id=str(cmd.user_id),
    )


def _conflict(field: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.USER_ALREADY_EXISTS,
        message=f"User with this {field} already exists",
        resource_type="User",
        conflicting_field=field,
    )
