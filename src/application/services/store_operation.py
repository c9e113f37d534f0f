"""Guarded user-store calls.

Every store call made by a handler goes through ``run_store_operation``:
it applies the configured deadline and turns store exceptions into
Failure results, so handlers stay on the Result rails.

Mapping:
    DuplicateRecordError -> ConflictError(USER_ALREADY_EXISTS)
    RepositoryError      -> PersistenceError(PERSISTENCE_FAILED)
    TimeoutError         -> PersistenceError(PERSISTENCE_FAILED)
"""

import asyncio
from collections.abc import Awaitable

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.errors import DuplicateRecordError, PersistenceError, RepositoryError
from src.domain.protocols.logger_protocol import LoggerProtocol


async def run_store_operation[T](
    operation: str,
    call: Awaitable[T],
    *,
    timeout: float,
    logger: LoggerProtocol,
) -> Result[T, DomainError]:
    """Await a store call under a deadline.

    Args:
        operation: Store operation name, for logs and error details.
        call: The pending store coroutine.
        timeout: Deadline in seconds.
        logger: Logger for infrastructure failures.

    Returns:
        Success(value) or Failure(ConflictError | PersistenceError).
    """
    try:
        async with asyncio.timeout(timeout):
            value = await call
    except DuplicateRecordError:
        return Failure(
            error=ConflictError(
                code=ErrorCode.USER_ALREADY_EXISTS,
                message="User with this email or username already exists",
                resource_type="User",
            )
        )
    except TimeoutError as e:
        logger.error("User store call timed out", error=e, operation=operation, timeout=timeout)
        return Failure(
            error=PersistenceError(
                code=ErrorCode.PERSISTENCE_FAILED,
                message=f"User store {operation} timed out",
                operation=operation,
            )
        )
    except RepositoryError as e:
        logger.error("User store call failed", error=e, operation=operation)
        return Failure(
            error=PersistenceError(
                code=ErrorCode.PERSISTENCE_FAILED,
                message=f"User store {operation} failed",
                operation=operation,
            )
        )

    return Success(value=value)
