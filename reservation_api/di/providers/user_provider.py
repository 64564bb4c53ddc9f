from typing import TYPE_CHECKING

from ...domain.repositories.user_store import UserStore
from ...application.use_cases.users import (
    CreateUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User use case provider - registers all user-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all user use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CreateUserUseCase,
            lambda: CreateUserUseCase(user_store=container.get(UserStore))
        )

        container.register_factory(
            GetUserUseCase,
            lambda: GetUserUseCase(user_store=container.get(UserStore))
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(user_store=container.get(UserStore))
        )

        container.register_factory(
            UpdateUserUseCase,
            lambda: UpdateUserUseCase(user_store=container.get(UserStore))
        )
