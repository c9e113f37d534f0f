"""User store failure types.

Store adapters raise ``RepositoryError`` (an exception) when the backing
store fails. Handlers catch it, together with store timeouts, and return
``Failure(error=PersistenceError(...))`` so the failure flows as data.
"""

from dataclasses import dataclass

from src.core.errors import DomainError


class RepositoryError(Exception):
    """Raised by user store adapters on infrastructure failure."""


class DuplicateRecordError(RepositoryError):
    """Raised when a write would break email/username uniqueness.

    Covers the race where two registrations pass the uniqueness check
    concurrently and the store rejects the second write.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class PersistenceError(DomainError):
    """User store failure surfaced through a Result.

    Attributes:
        operation: Store operation that failed (create, get_by_id, ...).
    """

    operation: str | None = None
