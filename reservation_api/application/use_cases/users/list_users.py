# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.user_dto import UserResponse, to_external_list


class ListUsersUseCase:
    """Use case for listing all users"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self) -> List[UserResponse]:
        """List every user in insertion order"""
        users = await self.user_store.get_all()
        return to_external_list(users)
