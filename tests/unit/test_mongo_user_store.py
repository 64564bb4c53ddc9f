"""
Unit tests for MongoUserStore with a mocked motor client (no real DB).
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import (
    AutoReconnect,
    DuplicateKeyError,
    ExecutionTimeout,
    OperationFailure,
    ServerSelectionTimeoutError,
)

from reservation_api.core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
    ValidationError,
)
from reservation_api.domain.models.user import CreateUserParams, UpdateUserParams
from reservation_api.infrastructure.db.mongo_user_store import MongoUserStore


def _stub_hasher(password: str) -> str:
    return "$2b$04$stubbed" + str(len(password))


def _document(object_id=None, first_name="James", last_name="St. James") -> dict:
    return {
        "_id": object_id or ObjectId(),
        "firstName": first_name,
        "lastName": last_name,
        "email": "valid_email1@email.com",
        "encryptedPassword": "$2b$04$stored",
    }


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.name = "users"
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.drop = AsyncMock()
    return collection


@pytest.fixture
def client(collection):
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    return client


def _make_store(client, **kwargs) -> MongoUserStore:
    kwargs.setdefault("read_retry_attempts", 0)
    return MongoUserStore(
        client=client,
        database_name="hot-res-test",
        password_hasher=_stub_hasher,
        **kwargs,
    )


class TestConstruction:
    """Tests for collection selection"""

    def test_uses_configured_database_and_collection(self, client):
        MongoUserStore(client=client, database_name="hot-res-test", collection_name="people")
        client.__getitem__.assert_called_with("hot-res-test")
        client.__getitem__.return_value.__getitem__.assert_called_with("people")


class TestGetById:
    """Tests for get_by_id"""

    @pytest.mark.asyncio
    async def test_found(self, client, collection):
        object_id = ObjectId()
        collection.find_one.return_value = _document(object_id)
        user = await _make_store(client).get_by_id(str(object_id))
        assert user.id == str(object_id)
        assert user.first_name == "James"
        assert user.encrypted_password == "$2b$04$stored"
        collection.find_one.assert_awaited_once_with({"_id": object_id})

    @pytest.mark.asyncio
    async def test_zero_match_is_not_found(self, client, collection):
        collection.find_one.return_value = None
        with pytest.raises(NotFoundError):
            await _make_store(client).get_by_id("000000000000000000000000")

    @pytest.mark.asyncio
    async def test_malformed_id_never_reaches_db(self, client, collection):
        with pytest.raises(ValidationError):
            await _make_store(client).get_by_id("1234")
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_connection_failure_translated(self, client, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        user_id = str(ObjectId())
        with pytest.raises(StoreConnectionError) as exc_info:
            await _make_store(client).get_by_id(user_id)
        assert exc_info.value.operation == "get_by_id"
        assert exc_info.value.identifier == user_id
        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_server_timeout_translated(self, client, collection):
        collection.find_one.side_effect = ExecutionTimeout("operation exceeded time limit")
        with pytest.raises(StoreTimeoutError):
            await _make_store(client).get_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_operation_deadline_enforced(self, client, collection):
        async def hang(*args, **kwargs):
            await asyncio.sleep(5)

        collection.find_one.side_effect = hang
        with pytest.raises(StoreTimeoutError):
            await _make_store(client, operation_timeout=0.01).get_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_cancellation_reaches_driver_call(self, client, collection):
        started = asyncio.Event()
        driver_cancelled = asyncio.Event()

        async def hang(*args, **kwargs):
            started.set()
            try:
                await asyncio.sleep(5)
            except asyncio.CancelledError:
                driver_cancelled.set()
                raise

        collection.find_one.side_effect = hang
        store = _make_store(client, operation_timeout=5)
        task = asyncio.create_task(store.get_by_id(str(ObjectId())))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert driver_cancelled.is_set()

    @pytest.mark.asyncio
    async def test_driver_error_translated(self, client, collection):
        collection.find_one.side_effect = OperationFailure("bad query")
        with pytest.raises(StoreError):
            await _make_store(client).get_by_id(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_reads_retried_on_connection_error(self, client, collection):
        object_id = ObjectId()
        collection.find_one.side_effect = [AutoReconnect("blip"), _document(object_id)]
        store = _make_store(client, read_retry_attempts=2)
        with patch("reservation_api.utils.retry_utils.asyncio.sleep", new_callable=AsyncMock):
            user = await store.get_by_id(str(object_id))
        assert user.id == str(object_id)
        assert collection.find_one.await_count == 2

    @pytest.mark.asyncio
    async def test_corrupt_document_is_store_error(self, client, collection):
        document = _document()
        del document["encryptedPassword"]
        collection.find_one.return_value = document
        with pytest.raises(StoreError) as exc_info:
            await _make_store(client).get_by_id(str(document["_id"]))
        assert exc_info.value.operation == "get_by_id"
        assert exc_info.value.identifier == str(document["_id"])


class TestGetAll:
    """Tests for get_all"""

    @pytest.mark.asyncio
    async def test_sorted_by_insertion(self, client, collection):
        documents = [_document(), _document(first_name="Second")]
        cursor = collection.find.return_value.sort.return_value
        cursor.to_list = AsyncMock(return_value=documents)

        users = await _make_store(client).get_all()

        collection.find.assert_called_once_with({})
        collection.find.return_value.sort.assert_called_once_with("_id", ASCENDING)
        assert [user.first_name for user in users] == ["James", "Second"]

    @pytest.mark.asyncio
    async def test_empty(self, client, collection):
        collection.find.return_value.sort.return_value.to_list = AsyncMock(return_value=[])
        assert await _make_store(client).get_all() == []


class TestInsert:
    """Tests for insert"""

    @pytest.mark.asyncio
    async def test_insert_returns_user_with_generated_id(self, client, collection):
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        params = CreateUserParams(
            email="valid_email@email.com",
            first_name="James",
            last_name="Foo",
            password="valid_password123",
        )

        user = await _make_store(client).insert(params)

        assert user.id == str(inserted_id)
        stored = collection.insert_one.await_args.args[0]
        assert stored["firstName"] == "James"
        assert stored["lastName"] == "Foo"
        assert stored["email"] == "valid_email@email.com"
        assert stored["encryptedPassword"] == _stub_hasher("valid_password123")
        assert "valid_password123" not in stored.values()

    @pytest.mark.asyncio
    async def test_invalid_params_never_reach_db(self, client, collection):
        params = CreateUserParams(email="x@y.z", first_name="A", last_name="B", password="123")
        with pytest.raises(ValidationError):
            await _make_store(client).insert(params)
        collection.insert_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_key_is_conflict(self, client, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        params = CreateUserParams(email="x@y.z", first_name="A", last_name="B", password="valid_password123")
        with pytest.raises(ConflictError):
            await _make_store(client).insert(params)

    @pytest.mark.asyncio
    async def test_insert_is_never_retried(self, client, collection):
        collection.insert_one.side_effect = AutoReconnect("blip")
        params = CreateUserParams(email="x@y.z", first_name="A", last_name="B", password="valid_password123")
        store = _make_store(client, read_retry_attempts=3)
        with pytest.raises(StoreConnectionError):
            await store.insert(params)
        assert collection.insert_one.await_count == 1


class TestUpdate:
    """Tests for update"""

    @pytest.mark.asyncio
    async def test_sets_only_supplied_fields(self, client, collection):
        object_id = ObjectId()
        collection.find_one_and_update.return_value = _document(object_id, first_name="X")

        user = await _make_store(client).update(str(object_id), UpdateUserParams(first_name="X"))

        assert user.first_name == "X"
        assert user.last_name == "St. James"
        collection.find_one_and_update.assert_awaited_once_with(
            {"_id": object_id},
            {"$set": {"firstName": "X"}},
            return_document=ReturnDocument.AFTER,
        )

    @pytest.mark.asyncio
    async def test_zero_match_is_not_found(self, client, collection):
        collection.find_one_and_update.return_value = None
        with pytest.raises(NotFoundError):
            await _make_store(client).update(
                "000000000000000000000000", UpdateUserParams(last_name="Y")
            )

    @pytest.mark.asyncio
    async def test_empty_update_reads_current_record(self, client, collection):
        object_id = ObjectId()
        collection.find_one.return_value = _document(object_id)
        user = await _make_store(client).update(str(object_id), UpdateUserParams())
        assert user.id == str(object_id)
        collection.find_one_and_update.assert_not_called()

    @pytest.mark.asyncio
    async def test_corrupt_document_tagged_with_update(self, client, collection):
        document = _document()
        del document["encryptedPassword"]
        collection.find_one_and_update.return_value = document
        with pytest.raises(StoreError) as exc_info:
            await _make_store(client).update(str(document["_id"]), UpdateUserParams(last_name="Y"))
        assert exc_info.value.operation == "update"

    @pytest.mark.asyncio
    async def test_malformed_id_never_reaches_db(self, client, collection):
        with pytest.raises(ValidationError):
            await _make_store(client).update("nope", UpdateUserParams(first_name="X"))
        collection.find_one_and_update.assert_not_called()


class TestDrop:
    """Tests for drop"""

    @pytest.mark.asyncio
    async def test_drop_drops_collection(self, client, collection):
        await _make_store(client).drop()
        collection.drop.assert_awaited_once()
