"""Users resource endpoints (bearer token required).

GET    /api/v1/users/profile    - Current user's profile
PUT    /api/v1/users/profile    - Update current user's profile
GET    /api/v1/users            - Paginated list (?page=1&limit=10)
GET    /api/v1/users/{user_id}  - One user
PUT    /api/v1/users/{user_id}  - Update a user
DELETE /api/v1/users/{user_id}  - Delete a user
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.application.commands import DeleteUser, UpdateUser
from src.application.commands.handlers import DeleteUserHandler, UpdateUserHandler
from src.application.queries import GetUser, ListUsers
from src.application.queries.handlers import GetUserHandler, ListUsersHandler
from src.core.container import (
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import error_response, success_response
from src.schemas.user_schemas import UpdateUserRequest, UserListResponse, UserResponse

users_router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(get_current_user)],
)


def _parse_user_id(raw: str) -> UUID | JSONResponse:
    try:
        return UUID(raw)
    except ValueError:
        return error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid user ID",
            error=[{"field": "user_id", "message": "must be a UUID"}],
        )


def _update_command(user_id: UUID, data: UpdateUserRequest) -> UpdateUser:
    return UpdateUser(
        user_id=user_id,
        email=data.email,
        username=data.username,
        first_name=data.first_name,
        last_name=data.last_name,
        avatar=data.avatar,
    )


@users_router.get("/profile")
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> JSONResponse:
    """Return the authenticated user's profile."""
    match await handler.handle(GetUser(user_id=current_user.user_id)):
        case Success(value=user):
            return success_response(
                "Profile retrieved successfully", UserResponse.from_entity(user)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@users_router.put("/profile")
async def update_profile(
    data: UpdateUserRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> JSONResponse:
    """Partially update the authenticated user's profile."""
    match await handler.handle(_update_command(current_user.user_id, data)):
        case Success(value=user):
            return success_response(
                "Profile updated successfully", UserResponse.from_entity(user)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@users_router.get("")
async def list_users(
    page: int = 1,
    limit: int = 10,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> JSONResponse:
    """List users; out-of-range page/limit fall back to defaults."""
    match await handler.handle(ListUsers(page=page, limit=limit)):
        case Success(value=user_page):
            return success_response(
                "Users retrieved successfully", UserListResponse.from_page(user_page)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@users_router.get("/{user_id}")
async def get_user(
    user_id: str,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> JSONResponse:
    """Return one user by id."""
    parsed = _parse_user_id(user_id)
    if isinstance(parsed, JSONResponse):
        return parsed

    match await handler.handle(GetUser(user_id=parsed)):
        case Success(value=user):
            return success_response(
                "User retrieved successfully", UserResponse.from_entity(user)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@users_router.put("/{user_id}")
async def update_user(
    user_id: str,
    data: UpdateUserRequest,
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> JSONResponse:
    """Partially update a user by id."""
    parsed = _parse_user_id(user_id)
    if isinstance(parsed, JSONResponse):
        return parsed

    match await handler.handle(_update_command(parsed, data)):
        case Success(value=user):
            return success_response(
                "User updated successfully", UserResponse.from_entity(user)
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@users_router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> JSONResponse:
    """Delete a user by id."""
    parsed = _parse_user_id(user_id)
    if isinstance(parsed, JSONResponse):
        return parsed

    match await handler.handle(DeleteUser(user_id=parsed)):
        case Success():
            return success_response("User deleted successfully")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
