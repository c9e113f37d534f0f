"""User domain entity.

Pure business logic, no framework dependencies.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """Registered user account.

    Business Rules:
        - Email and username are each unique across users
        - New users are active; inactive users cannot log in or refresh
        - password_hash is a bcrypt hash, never plaintext

    Attributes:
        id: Unique user identifier (UUIDv7, time-ordered).
        email: Normalized (lowercase) email address.
        username: Public handle.
        password_hash: Bcrypt hash of the password.
        first_name: Optional given name.
        last_name: Optional family name.
        avatar: Optional avatar URL.
        is_active: Whether the account may authenticate.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="jane@example.com",
        ...     username="jane",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.full_name
        ''
    """

    id: UUID
    email: str
    username: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    avatar: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        now = datetime.now(UTC)
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = self.created_at

    @property
    def full_name(self) -> str:
        """First and last name joined, skipping blanks."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def update_profile(
        self,
        *,
        email: str | None = None,
        username: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        avatar: str | None = None,
    ) -> None:
        """Apply a partial profile update.

        Only non-None arguments are applied. ``updated_at`` is refreshed
        whenever the call is made.
        """
        if email is not None:
            self.email = email
        if username is not None:
            self.username = username
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if avatar is not None:
            self.avatar = avatar
        self.updated_at = datetime.now(UTC)
