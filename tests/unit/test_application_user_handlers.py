"""Unit tests for user management handlers.

Tests cover:
- GetUserHandler read-through caching
- UpdateUserHandler partial updates, conflicts and cache eviction
- DeleteUserHandler not-found and cache eviction
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers import DeleteUserHandler, UpdateUserHandler
from src.application.commands.user_commands import DeleteUser, UpdateUser
from src.application.queries import GetUser
from src.application.queries.handlers import GetUserHandler
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Success
from tests.conftest import create_mock_user


@pytest.mark.unit
class TestGetUserHandler:
    """Test read-through caching."""

    async def test_cache_hit_skips_store(self):
        # Arrange
        user = create_mock_user()
        user_repo = AsyncMock()
        user_cache = AsyncMock()
        user_cache.get.return_value = user
        handler = GetUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock())

        # Act
        result = await handler.handle(GetUser(user_id=user.id))

        # Assert
        assert result == Success(value=user)
        user_repo.get_by_id.assert_not_called()

    async def test_cache_miss_loads_and_fills_cache(self):
        # Arrange
        user = create_mock_user()
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = user
        user_cache = AsyncMock()
        user_cache.get.return_value = None
        handler = GetUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock())

        # Act
        result = await handler.handle(GetUser(user_id=user.id))

        # Assert
        assert result == Success(value=user)
        user_cache.set.assert_awaited_once_with(user)

    async def test_missing_user_is_not_found(self):
        # Arrange
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = None
        user_cache = AsyncMock()
        user_cache.get.return_value = None
        handler = GetUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock())

        # Act
        result = await handler.handle(GetUser(user_id=uuid7()))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        user_cache.set.assert_not_called()


@pytest.mark.unit
class TestUpdateUserHandler:
    """Test partial profile updates."""

    def _handler(self, user_repo: AsyncMock) -> tuple[UpdateUserHandler, AsyncMock]:
        user_cache = AsyncMock()
        return (
            UpdateUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock()),
            user_cache,
        )

    async def test_applies_only_provided_fields(self):
        # Arrange
        user = create_mock_user(first_name="Jane", last_name="Doe")
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = user
        handler, user_cache = self._handler(user_repo)

        # Act
        result = await handler.handle(UpdateUser(user_id=user.id, first_name="Janet"))

        # Assert
        assert isinstance(result, Success)
        assert result.value.first_name == "Janet"
        assert result.value.last_name == "Doe"
        assert result.value.email == "jane@example.com"
        user_repo.update.assert_awaited_once_with(user)
        user_cache.delete.assert_awaited_once_with(user.id)

    async def test_email_held_by_other_user_conflicts(self):
        # Arrange
        user = create_mock_user()
        other = create_mock_user(email="taken@example.com", username="other")
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = user
        user_repo.get_by_email.return_value = other
        handler, _ = self._handler(user_repo)

        # Act
        result = await handler.handle(UpdateUser(user_id=user.id, email="taken@example.com"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.conflicting_field == "email"
        user_repo.update.assert_not_called()

    async def test_username_held_by_other_user_conflicts(self):
        # Arrange
        user = create_mock_user()
        other = create_mock_user(email="other@example.com", username="taken")
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = user
        user_repo.get_by_username.return_value = other
        handler, _ = self._handler(user_repo)

        # Act
        result = await handler.handle(UpdateUser(user_id=user.id, username="taken"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_ALREADY_EXISTS
        assert result.error.conflicting_field == "username"

    async def test_unchanged_email_skips_uniqueness_lookup(self):
        # Arrange
        user = create_mock_user()
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = user
        handler, _ = self._handler(user_repo)

        # Act
        result = await handler.handle(UpdateUser(user_id=user.id, email=user.email))

        # Assert
        assert isinstance(result, Success)
        user_repo.get_by_email.assert_not_called()

    async def test_missing_user_is_not_found(self):
        # Arrange
        user_repo = AsyncMock()
        user_repo.get_by_id.return_value = None
        handler, user_cache = self._handler(user_repo)

        # Act
        result = await handler.handle(UpdateUser(user_id=uuid7(), first_name="X"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        user_cache.delete.assert_not_called()


@pytest.mark.unit
class TestDeleteUserHandler:
    """Test account deletion."""

    async def test_delete_evicts_cache(self):
        # Arrange
        user_id = uuid7()
        user_repo = AsyncMock()
        user_repo.delete.return_value = True
        user_cache = AsyncMock()
        handler = DeleteUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock())

        # Act
        result = await handler.handle(DeleteUser(user_id=user_id))

        # Assert
        assert result == Success(value=None)
        user_cache.delete.assert_awaited_once_with(user_id)

    async def test_delete_missing_user_is_not_found(self):
        # Arrange
        user_repo = AsyncMock()
        user_repo.delete.return_value = False
        user_cache = AsyncMock()
        handler = DeleteUserHandler(user_repo=user_repo, user_cache=user_cache, logger=Mock())

        # Act
        result = await handler.handle(DeleteUser(user_id=uuid7()))

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USER_NOT_FOUND
        user_cache.delete.assert_not_called()
