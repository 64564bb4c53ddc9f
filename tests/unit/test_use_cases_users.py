"""
Unit tests for user use cases (Create, Get, List, Update).
"""
from unittest.mock import AsyncMock

import pytest
from reservation_api.application.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserResponse
from reservation_api.application.use_cases.users import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from reservation_api.core.exceptions import NotFoundError, ValidationError
from reservation_api.domain.models.user import CreateUserParams, UpdateUserParams, User


def _make_user(user_id: str, first_name: str = "James") -> User:
    return User(
        id=user_id,
        first_name=first_name,
        last_name="St. James",
        email="valid_email1@email.com",
        encrypted_password="$2b$12$hashed",
    )


@pytest.fixture
def mock_user_store():
    """Mock UserStore with async methods."""
    return AsyncMock()


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_store):
        mock_user_store.insert.return_value = _make_user("usr-new")

        use_case = CreateUserUseCase(mock_user_store)
        result = await use_case.execute(
            CreateUserRequest(
                first_name="James",
                last_name="St. James",
                email="valid_email1@email.com",
                password="password123",
            )
        )

        assert isinstance(result, UserResponse)
        assert result.id == "usr-new"
        assert not hasattr(result, "encrypted_password")
        mock_user_store.insert.assert_awaited_once_with(
            CreateUserParams(
                email="valid_email1@email.com",
                first_name="James",
                last_name="St. James",
                password="password123",
            )
        )

    @pytest.mark.asyncio
    async def test_create_propagates_validation_error(self, mock_user_store):
        mock_user_store.insert.side_effect = ValidationError.for_field("password", "too short")
        use_case = CreateUserUseCase(mock_user_store)
        with pytest.raises(ValidationError, match="too short"):
            await use_case.execute(
                CreateUserRequest(first_name="A", last_name="B", email="a@b.c", password="123")
            )


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_store):
        mock_user_store.get_by_id.return_value = _make_user("usr-1")
        result = await GetUserUseCase(mock_user_store).execute("usr-1")
        assert result.id == "usr-1"
        assert result.first_name == "James"

    @pytest.mark.asyncio
    async def test_get_not_found_raises(self, mock_user_store):
        mock_user_store.get_by_id.side_effect = NotFoundError("usr-x")
        with pytest.raises(NotFoundError):
            await GetUserUseCase(mock_user_store).execute("usr-x")


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_user_store):
        mock_user_store.get_all.return_value = []
        assert await ListUsersUseCase(mock_user_store).execute() == []

    @pytest.mark.asyncio
    async def test_list_keeps_store_order(self, mock_user_store):
        mock_user_store.get_all.return_value = [
            _make_user("usr-1", "First"),
            _make_user("usr-2", "Second"),
        ]
        result = await ListUsersUseCase(mock_user_store).execute()
        assert [user.id for user in result] == ["usr-1", "usr-2"]
        assert result[1].first_name == "Second"


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_update_passes_only_supplied_fields(self, mock_user_store):
        mock_user_store.update.return_value = _make_user("usr-1", "NewName")
        request = UpdateUserRequest.model_validate({"firstName": "NewName"})

        result = await UpdateUserUseCase(mock_user_store).execute("usr-1", request)

        assert result.first_name == "NewName"
        mock_user_store.update.assert_awaited_once_with(
            "usr-1", UpdateUserParams(first_name="NewName", last_name=None)
        )
