from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
]
