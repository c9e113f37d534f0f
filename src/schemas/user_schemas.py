"""User request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.
The password hash never appears in any response schema.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.user_dtos import UserPage
from src.domain.entities.user import User
from src.domain.types import AvatarUrl, Email, PersonName, Username
from src.schemas.common_schemas import PaginationMeta


class UserResponse(BaseModel):
    """Public view of a user."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    username: str = Field(..., description="Username")
    first_name: str | None = Field(default=None, description="Given name")
    last_name: str | None = Field(default=None, description="Family name")
    avatar: str | None = Field(default=None, description="Avatar URL")
    is_active: bool = Field(..., description="Whether the account may log in")
    created_at: datetime | None = Field(default=None, description="Creation time (UTC)")
    updated_at: datetime | None = Field(default=None, description="Last update (UTC)")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        """Build from a domain User, dropping the password hash."""
        return cls(
            id=user.id,
            email=user.email,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            avatar=user.avatar,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateUserRequest(BaseModel):
    """Partial profile update.

    PUT /api/v1/users/profile, PUT /api/v1/users/{id}
    Omitted fields are left unchanged.
    """

    email: Email | None = None
    username: Username | None = None
    first_name: PersonName | None = None
    last_name: PersonName | None = None
    avatar: AvatarUrl | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {"first_name": "Jane", "avatar": "https://example.com/jane.png"}
        },
    )


class UserListResponse(BaseModel):
    """One page of users."""

    users: list[UserResponse]
    pagination: PaginationMeta

    @classmethod
    def from_page(cls, page: UserPage) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_entity(user) for user in page.users],
            pagination=PaginationMeta(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=page.total_pages,
            ),
        )
