from functools import partial
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...core.security import hash_password
from ...domain.repositories.user_store import UserStore
from ...domain.validators.user_validator import UserValidator
from ...infrastructure.db.memory_user_store import InMemoryUserStore
from ...infrastructure.db.mongo_user_store import MongoUserStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Store registration provider - wires the UserStore interface to a backend"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register the UserStore implementation selected by USER_STORE_BACKEND.

        Raises:
            ValueError: For an unknown backend name
        """
        validator = UserValidator(min_password_length=settings.min_password_length)
        password_hasher = partial(hash_password, rounds=settings.bcrypt_rounds)

        if settings.user_store_backend == "memory":
            store: UserStore = InMemoryUserStore(
                validator=validator,
                password_hasher=password_hasher,
            )
        elif settings.user_store_backend == "mongo":
            store = MongoUserStore(
                client=container.get("mongo_client"),
                database_name=settings.mongo_database_name,
                collection_name=settings.mongo_user_collection,
                operation_timeout=settings.store_operation_timeout_seconds,
                read_retry_attempts=settings.read_retry_attempts,
                validator=validator,
                password_hasher=password_hasher,
            )
        else:
            raise ValueError(f"Unknown USER_STORE_BACKEND: {settings.user_store_backend!r}")

        container.register_singleton(UserStore, store)
