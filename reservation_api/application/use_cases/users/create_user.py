# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_store import UserStore
from ...dto.user_dto import CreateUserRequest, UserResponse, to_external

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """
        Create a new user

        Args:
            request: Creation request with user details and plaintext password

        Returns:
            UserResponse with created user information (no password)

        Raises:
            ValidationError: If any field rule fails; nothing is written
            HashError: If the password cannot be hashed; nothing is written
            StoreError: On backend failure
        """
        user = await self.user_store.insert(request.to_params())
        logger.info(f"Created user {user.id}")
        return to_external(user)
