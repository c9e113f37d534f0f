"""User management commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UpdateUser:
    """Partially update a user's profile.

    Only non-None fields are applied.

    Attributes:
        user_id: Target user.
        email: New normalized email.
        username: New username.
        first_name: New given name.
        last_name: New family name.
        avatar: New avatar URL.
    """

    user_id: UUID
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None

    @property
    def has_changes(self) -> bool:
        """True if at least one field is set."""
        return any(
            value is not None
            for value in (
                self.email,
                self.username,
                self.first_name,
                self.last_name,
                self.avatar,
            )
        )


@dataclass(frozen=True, kw_only=True)
class DeleteUser:
    """Delete a user account.

    Attributes:
        user_id: Target user.
    """

    user_id: UUID
