# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.user_dto import UserResponse, to_external


class GetUserUseCase:
    """Use case for fetching a single user"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the user does not exist
        """
        user = await self.user_store.get_by_id(user_id)
        return to_external(user)
