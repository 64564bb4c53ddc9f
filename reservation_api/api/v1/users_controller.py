# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.user_dto import CreateUserRequest, UpdateUserRequest, UserResponse
from ...application.use_cases.users import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from ...di.container import get_container


router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserResponse)
async def create_user(request: CreateUserRequest) -> UserResponse:
    """
    Create a new user

    Args:
        request: User creation request

    Returns:
        UserResponse with created user information
    """
    container = get_container()
    create_use_case = container.get(CreateUserUseCase)
    return await create_use_case.execute(request)


@router.get("/users", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """List all users"""
    container = get_container()
    list_use_case = container.get(ListUsersUseCase)
    return await list_use_case.execute()


@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    """Get a single user by ID"""
    container = get_container()
    get_use_case = container.get(GetUserUseCase)
    return await get_use_case.execute(user_id)


@router.put("/user/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, request: UpdateUserRequest) -> UserResponse:
    """
    Partially update a user

    Args:
        user_id: ID of the user to update
        request: Fields to change; omitted fields are left as they are

    Returns:
        UserResponse with the updated user
    """
    container = get_container()
    update_use_case = container.get(UpdateUserUseCase)
    return await update_use_case.execute(user_id, request)
