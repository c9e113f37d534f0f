"""Cache key construction utilities.

Centralized key construction so every cache operation agrees on the layout.
Keys are ``user:{user_id}``, optionally namespaced as ``{prefix}:user:{user_id}``.

Usage:
    keys = CacheKeys()
    keys.user(user_id)  # "user:0190..."
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class CacheKeys:
    """Centralized cache key construction.

    Attributes:
        prefix: Optional namespace shared with other applications on the
            same Redis database.
    """

    prefix: str = ""

    def _key(self, *parts: str) -> str:
        body = ":".join(parts)
        return f"{self.prefix}:{body}" if self.prefix else body

    def user(self, user_id: UUID) -> str:
        """User record cache key.

        Example:
            "user:123e4567-e89b-12d3-a456-426614174000"
        """
        return self._key("user", str(user_id))
