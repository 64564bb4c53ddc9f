# Standard library imports
import dataclasses
import logging
from typing import Dict, List, Optional

# External package imports
from bson import ObjectId

# Local application imports
from ...core.exceptions import NotFoundError, ValidationError
from ...core.security import hash_password
from ...domain.models.user import User
from ...domain.repositories.user_store import PasswordHasher, UserStore
from ...domain.validators.user_validator import UserValidator

logger = logging.getLogger(__name__)


class InMemoryUserStore(UserStore):
    """
    In-process implementation of UserStore for tests and local development.

    Ids are ObjectId hex strings, so malformed and unknown ids behave the same
    way they do against MongoDB. Callers always receive copies.
    """

    def __init__(
        self,
        validator: Optional[UserValidator] = None,
        password_hasher: PasswordHasher = hash_password,
    ) -> None:
        super().__init__(validator=validator, password_hasher=password_hasher)
        self._users: Dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User:
        self._check_id(user_id)
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return dataclasses.replace(user)

    async def get_all(self) -> List[User]:
        # dicts keep insertion order
        return [dataclasses.replace(user) for user in self._users.values()]

    async def drop(self) -> None:
        count = len(self._users)
        self._users.clear()
        logger.warning(f"Dropped {count} in-memory user(s)")

    def _check_id(self, user_id: str) -> None:
        if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
            raise ValidationError.for_field("id", f"invalid id: {user_id!r}")

    async def _insert_user(self, user: User) -> User:
        stored = dataclasses.replace(user, id=str(ObjectId()))
        self._users[stored.id] = stored
        return dataclasses.replace(stored)

    async def _update_fields(self, user_id: str, changes: Dict[str, str]) -> User:
        current = self._users.get(user_id)
        if current is None:
            raise NotFoundError(user_id)
        updated = dataclasses.replace(current, **changes)
        self._users[user_id] = updated
        return dataclasses.replace(updated)
