# Standard library imports
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional

# Local application imports
from ...core.exceptions import HashError
from ...core.security import hash_password
from ..models.user import CreateUserParams, UpdateUserParams, User
from ..validators.user_validator import UserValidator

logger = logging.getLogger(__name__)

PasswordHasher = Callable[[str], str]


class UserStore(ABC):
    """
    Store interface - defines contract for user data access.

    insert() and update() are implemented here so every backend gets the same
    ordering: validate, then hash (insert only), then write. Backends supply
    the raw persistence hooks.

    get_all() returns users in insertion order.
    """

    def __init__(
        self,
        validator: Optional[UserValidator] = None,
        password_hasher: PasswordHasher = hash_password,
    ) -> None:
        self.validator = validator if validator is not None else UserValidator()
        self.password_hasher = password_hasher

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """
        Find user by ID

        Raises:
            ValidationError: If the id is malformed for this backend
            NotFoundError: If no user has this id
            StoreError: On backend failure
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[User]:
        """Return every user, oldest first"""
        pass

    @abstractmethod
    async def drop(self) -> None:
        """Delete every user. Administrative use only (environment reset)."""
        pass

    async def insert(self, params: CreateUserParams) -> User:
        """
        Validate, hash and persist a new user

        Args:
            params: Create request; the plaintext password is not kept

        Returns:
            The stored User, including the generated id and password hash

        Raises:
            ValidationError: Before any hashing or I/O
            HashError: If hashing fails; nothing is written
            StoreError: On backend failure
        """
        self.validator.validate_create(params)

        encrypted_password = self.password_hasher(params.password)
        if not encrypted_password or encrypted_password == params.password:
            raise HashError("password hasher returned an unusable digest")

        user = User(
            id=None,  # Will be set by the backend
            first_name=params.first_name,
            last_name=params.last_name,
            email=params.email,
            encrypted_password=encrypted_password,
        )
        saved = await self._insert_user(user)
        logger.debug(f"Inserted user {saved.id}")
        return saved

    async def update(self, user_id: str, params: UpdateUserParams) -> User:
        """
        Merge the supplied fields into an existing user

        id and encrypted_password are never touched. An update that supplies
        no fields returns the current record.

        Raises:
            ValidationError: Bad params or malformed id, before any I/O
            NotFoundError: If no user has this id
            StoreError: On backend failure
        """
        self.validator.validate_update(params)
        self._check_id(user_id)

        changes = params.changes()
        if not changes:
            return await self.get_by_id(user_id)

        updated = await self._update_fields(user_id, changes)
        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return updated

    @abstractmethod
    def _check_id(self, user_id: str) -> None:
        """Raise ValidationError if user_id is not a well-formed id for this backend"""
        pass

    @abstractmethod
    async def _insert_user(self, user: User) -> User:
        """Persist a validated, hashed user and return it with its new id"""
        pass

    @abstractmethod
    async def _update_fields(self, user_id: str, changes: Dict[str, str]) -> User:
        """Apply changes (User attribute name -> value) and return the updated user"""
        pass
