"""User queries (CQRS read operations).

Queries are immutable requests for data; they never change state.
"""

from dataclasses import dataclass
from uuid import UUID

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Fetch one user by id.

    Attributes:
        user_id: Target user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    """Fetch one page of users.

    Out-of-range values are normalized rather than rejected: a page below 1
    becomes 1, and a limit below 1 or above 100 becomes 10.

    Attributes:
        page: 1-based page number.
        limit: Page size.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            object.__setattr__(self, "page", DEFAULT_PAGE)
        if self.limit < 1 or self.limit > MAX_PAGE_SIZE:
            object.__setattr__(self, "limit", DEFAULT_PAGE_SIZE)

    @property
    def offset(self) -> int:
        """Number of users to skip."""
        return (self.page - 1) * self.limit
