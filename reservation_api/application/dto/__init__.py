from .user_dto import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    to_external,
    to_external_list,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "to_external",
    "to_external_list",
]
