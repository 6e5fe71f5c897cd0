"""
Tests for MongoRepository against a mocked AsyncCollection.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from content_ingest.core.exceptions import (
    DuplicateRecordError,
    InvalidIdentifierError,
    RepositoryError,
)
from content_ingest.db.repository import MongoRepository, serialize_document, to_object_id

OBJECT_ID = ObjectId("0123456789abcdef01234567")


@pytest.fixture
def repository(mock_collection):
    return MongoRepository(mock_collection)


class TestHelpers:
    def test_to_object_id(self):
        assert to_object_id(str(OBJECT_ID)) == OBJECT_ID

    def test_to_object_id_passes_object_ids_through(self):
        assert to_object_id(OBJECT_ID) is OBJECT_ID

    @pytest.mark.parametrize("value", ["abc", "", None, "0123456789abcdef0123456z"])
    def test_to_object_id_rejects_malformed(self, value):
        with pytest.raises(InvalidIdentifierError):
            to_object_id(value)

    def test_serialize_document(self):
        assert serialize_document({"_id": OBJECT_ID, "title": "x"}) == {
            "id": str(OBJECT_ID),
            "title": "x",
        }

    def test_serialize_none(self):
        assert serialize_document(None) is None


class TestInsert:
    @pytest.mark.asyncio
    async def test_adds_timestamps_and_id(self, repository, mock_collection):
        mock_collection.insert_one.return_value = MagicMock(inserted_id=OBJECT_ID)

        record = await repository.insert({"title": "x", "id": "ignored", "_id": "ignored"})

        stored = mock_collection.insert_one.await_args.args[0]
        assert "id" not in stored
        assert isinstance(stored["created_at"], datetime)
        assert stored["created_at"] == stored["updated_at"]
        assert record["id"] == str(OBJECT_ID)
        assert record["title"] == "x"

    @pytest.mark.asyncio
    async def test_duplicate_key(self, repository, mock_collection):
        mock_collection.insert_one.side_effect = DuplicateKeyError(
            "E11000 duplicate key", code=11000, details={"keyValue": {"url": "https://a"}}
        )

        with pytest.raises(DuplicateRecordError) as exc_info:
            await repository.insert({"url": "https://a"})
        assert exc_info.value.message == "Duplicate field value: url. Please use another value"

    @pytest.mark.asyncio
    async def test_driver_error(self, repository, mock_collection):
        mock_collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(RepositoryError) as exc_info:
            await repository.insert({"title": "x"})
        assert exc_info.value.collection == "blogs"


class TestFind:
    @pytest.mark.asyncio
    async def test_find_by_id(self, repository, mock_collection):
        mock_collection.find_one.return_value = {"_id": OBJECT_ID, "title": "x"}

        record = await repository.find_by_id(str(OBJECT_ID))

        mock_collection.find_one.assert_awaited_once_with({"_id": OBJECT_ID})
        assert record == {"id": str(OBJECT_ID), "title": "x"}

    @pytest.mark.asyncio
    async def test_find_applies_cursor_options(self, repository, mock_collection):
        mock_collection.cursor.to_list.return_value = [{"_id": OBJECT_ID}]

        records = await repository.find(
            {"status": "active"}, sort=[("created_at", -1)], skip=10, limit=5
        )

        mock_collection.find.assert_called_once_with({"status": "active"}, None)
        mock_collection.cursor.sort.assert_called_once_with([("created_at", -1)])
        mock_collection.cursor.skip.assert_called_once_with(10)
        mock_collection.cursor.limit.assert_called_once_with(5)
        assert records == [{"id": str(OBJECT_ID)}]

    @pytest.mark.asyncio
    async def test_find_without_options(self, repository, mock_collection):
        await repository.find({})

        mock_collection.cursor.sort.assert_not_called()
        mock_collection.cursor.skip.assert_not_called()
        mock_collection.cursor.limit.assert_not_called()

    @pytest.mark.asyncio
    async def test_count(self, repository, mock_collection):
        mock_collection.count_documents.return_value = 7

        assert await repository.count({"status": "active"}) == 7


class TestUpdateDelete:
    @pytest.mark.asyncio
    async def test_update_sets_changes_and_updated_at(self, repository, mock_collection):
        mock_collection.find_one_and_update.return_value = {"_id": OBJECT_ID, "title": "new"}

        record = await repository.update_by_id(
            str(OBJECT_ID), {"title": "new", "created_at": "nope"}
        )

        query, update = mock_collection.find_one_and_update.await_args.args
        assert query == {"_id": OBJECT_ID}
        assert update["$set"]["title"] == "new"
        assert "created_at" not in update["$set"]
        assert isinstance(update["$set"]["updated_at"], datetime)
        assert (
            mock_collection.find_one_and_update.await_args.kwargs["return_document"]
            == ReturnDocument.AFTER
        )
        assert record["title"] == "new"

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, repository):
        assert await repository.update_one({"url": "x"}, {"title": "y"}) is None

    @pytest.mark.asyncio
    async def test_delete(self, repository, mock_collection):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=1)

        assert await repository.delete_by_id(str(OBJECT_ID)) is True

    @pytest.mark.asyncio
    async def test_delete_missing(self, repository, mock_collection):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=0)

        assert await repository.delete_one({"url": "x"}) is False

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, repository, mock_collection):
        with pytest.raises(InvalidIdentifierError):
            await repository.delete_by_id("bad")
        mock_collection.delete_one.assert_not_awaited()
