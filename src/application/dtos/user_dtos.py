"""User management DTOs."""

import math
from dataclasses import dataclass

from src.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class UserPage:
    """One page of users plus pagination metadata.

    Attributes:
        users: Users on this page.
        page: 1-based page number.
        limit: Page size.
        total: Total number of users.
    """

    users: list[User]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        """ceil(total / limit); 0 when there are no users."""
        return math.ceil(self.total / self.limit) if self.limit else 0
