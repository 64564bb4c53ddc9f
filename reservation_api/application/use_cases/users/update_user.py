# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.user_dto import UpdateUserRequest, UserResponse, to_external


class UpdateUserUseCase:
    """Use case for partially updating a user"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, user_id: str, request: UpdateUserRequest) -> UserResponse:
        """
        Apply the supplied fields to an existing user

        Args:
            user_id: ID of the user to update
            request: Fields to change; omitted fields keep their values

        Returns:
            UserResponse with the updated user

        Raises:
            ValidationError: If the id or a supplied field is invalid
            NotFoundError: If the user does not exist
        """
        user = await self.user_store.update(user_id, request.to_params())
        return to_external(user)
