from .user import User, CreateUserParams, UpdateUserParams

__all__ = ["User", "CreateUserParams", "UpdateUserParams"]
