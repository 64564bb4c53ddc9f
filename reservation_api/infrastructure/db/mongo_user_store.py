# Standard library imports
import asyncio
import dataclasses
import logging
from typing import Any, Awaitable, Dict, List, Optional

# External package imports
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import (
    ConnectionFailure,
    DuplicateKeyError,
    ExecutionTimeout,
    NetworkTimeout,
    PyMongoError,
    WTimeoutError,
)

# Local application imports
from ...core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
    ValidationError,
)
from ...core.security import hash_password
from ...domain.constants import UserFields
from ...domain.models.user import User
from ...domain.repositories.user_store import PasswordHasher, UserStore
from ...domain.validators.user_validator import UserValidator
from ...utils.retry_utils import call_with_retry

logger = logging.getLogger(__name__)

# User attribute name -> document field name, for fields that may be updated
_UPDATABLE_FIELDS = {
    "first_name": UserFields.FIRST_NAME,
    "last_name": UserFields.LAST_NAME,
}


class MongoUserStore(UserStore):
    """
    MongoDB implementation of UserStore

    Ids are ObjectId hex strings. get_all() sorts on _id, which follows
    insertion order. Reads are retried on connection/timeout errors; writes
    are not. Every call is bounded by operation_timeout seconds.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        database_name: str,
        collection_name: str = "users",
        operation_timeout: float = 10.0,
        read_retry_attempts: int = 2,
        validator: Optional[UserValidator] = None,
        password_hasher: PasswordHasher = hash_password,
    ) -> None:
        super().__init__(validator=validator, password_hasher=password_hasher)
        self.client = client
        self.user_collection = client[database_name][collection_name]
        self.operation_timeout = operation_timeout
        self.read_retry_attempts = read_retry_attempts

    async def get_by_id(self, user_id: str) -> User:
        """
        Find user by ID

        Args:
            user_id: ObjectId hex string

        Returns:
            User domain model
        """
        object_id = self._to_object_id(user_id)

        document = await call_with_retry(
            lambda: self._run(
                "get_by_id",
                user_id,
                self.user_collection.find_one({UserFields.MONGO_ID: object_id}),
            ),
            operation_name="get_by_id",
            max_retries=self.read_retry_attempts,
        )
        if document is None:
            raise NotFoundError(user_id)
        return self._document_to_user(document, "get_by_id")

    async def get_all(self) -> List[User]:
        """
        List every user, oldest first

        Returns:
            List of User domain models
        """
        async def fetch() -> List[Dict[str, Any]]:
            cursor = self.user_collection.find({}).sort(UserFields.MONGO_ID, ASCENDING)
            return await cursor.to_list(length=None)

        documents = await call_with_retry(
            lambda: self._run("get_all", None, fetch()),
            operation_name="get_all",
            max_retries=self.read_retry_attempts,
        )
        return [self._document_to_user(document, "get_all") for document in documents]

    async def drop(self) -> None:
        """Drop the users collection"""
        await self._run("drop", None, self.user_collection.drop())
        logger.warning(f"Dropped collection {self.user_collection.name}")

    def _check_id(self, user_id: str) -> None:
        self._to_object_id(user_id)

    async def _insert_user(self, user: User) -> User:
        document = self._user_to_document(user)
        result = await self._run("insert", None, self.user_collection.insert_one(document))
        return dataclasses.replace(user, id=str(result.inserted_id))

    async def _update_fields(self, user_id: str, changes: Dict[str, str]) -> User:
        object_id = self._to_object_id(user_id)
        update = {"$set": {_UPDATABLE_FIELDS[name]: value for name, value in changes.items()}}

        document = await self._run(
            "update",
            user_id,
            self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                update,
                return_document=ReturnDocument.AFTER,
            ),
        )
        if document is None:
            raise NotFoundError(user_id)
        return self._document_to_user(document, "update")

    async def _run(self, operation: str, identifier: Optional[str], awaitable: Awaitable[Any]) -> Any:
        """
        Await a driver call under the operation deadline and translate its errors

        Args:
            operation: Store operation name, carried on the raised error
            identifier: User id involved, if any
            awaitable: The pending driver call

        Returns:
            The driver call's result
        """
        context = operation if identifier is None else f"{operation} [{identifier}]"
        try:
            return await asyncio.wait_for(awaitable, timeout=self.operation_timeout)
        except asyncio.TimeoutError:
            raise StoreTimeoutError(
                f"{context}: timed out after {self.operation_timeout}s",
                operation=operation,
                identifier=identifier,
            ) from None
        except (NetworkTimeout, ExecutionTimeout, WTimeoutError) as e:
            raise StoreTimeoutError(
                f"{context}: {e}", operation=operation, identifier=identifier
            ) from e
        except DuplicateKeyError as e:
            raise ConflictError(f"{context}: duplicate key", operation=operation) from e
        except ConnectionFailure as e:
            raise StoreConnectionError(
                f"{context}: {e}", operation=operation, identifier=identifier
            ) from e
        except PyMongoError as e:
            logger.error(f"MongoDB error during {context}: {e}", exc_info=True)
            raise StoreError(f"{context}: {e}", operation=operation, identifier=identifier) from e

    @staticmethod
    def _to_object_id(user_id: str) -> ObjectId:
        if not isinstance(user_id, str) or not ObjectId.is_valid(user_id):
            raise ValidationError.for_field("id", f"invalid id: {user_id!r}")
        return ObjectId(user_id)

    def _document_to_user(self, document: Dict[str, Any], operation: str) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary
            operation: Store operation that read the document, carried on errors

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise StoreError("Invalid document: missing _id field", operation=operation)

        user_id = str(document[UserFields.MONGO_ID])
        try:
            return User(
                id=user_id,
                first_name=document.get(UserFields.FIRST_NAME, ""),
                last_name=document.get(UserFields.LAST_NAME, ""),
                email=document.get(UserFields.EMAIL, ""),
                encrypted_password=document.get(UserFields.ENCRYPTED_PASSWORD, ""),
            )
        except ValueError as e:
            raise StoreError(
                f"Invalid document {user_id}: {e}", operation=operation, identifier=user_id
            ) from e

    def _user_to_document(self, user: User) -> Dict[str, Any]:
        """
        Convert User domain model to MongoDB document

        The _id is left out; MongoDB assigns it on insert.
        """
        return {
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
            UserFields.EMAIL: user.email,
            UserFields.ENCRYPTED_PASSWORD: user.encrypted_password,
        }
