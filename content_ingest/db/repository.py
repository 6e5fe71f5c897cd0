"""
Generic MongoDB repository.

Pattern: Repository pattern over a single collection. Services only see
plain dicts with a string ``id`` and never touch ObjectId or driver errors.

Every stored document gets ``created_at`` and ``updated_at``; updates
refresh ``updated_at``. Driver failures are wrapped in RepositoryError and
unique-index violations in DuplicateRecordError so the API layer can map
them to 500 and 409 respectively.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Generator, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

from content_ingest.core.exceptions import (
    DuplicateRecordError,
    InvalidIdentifierError,
    RepositoryError,
)

SortSpec = list[tuple[str, int]]

# Fields managed by the repository; callers cannot overwrite them.
PROTECTED_FIELDS = frozenset({"_id", "id", "created_at", "updated_at"})


def to_object_id(value: Any) -> ObjectId:
    """
    Cast a path value to ObjectId.

    Raises:
        InvalidIdentifierError: If the value is not a 24-char hex string.
    """
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifierError(value) from e


def serialize_document(document: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    """Replace ``_id`` with a string ``id``. Returns None for None."""
    if document is None:
        return None
    result = dict(document)
    object_id = result.pop("_id", None)
    if object_id is not None:
        result["id"] = str(object_id)
    return result


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _duplicate_field(error: DuplicateKeyError) -> tuple[str, Any]:
    details = error.details or {}
    key_value = details.get("keyValue") or {}
    if key_value:
        field, value = next(iter(key_value.items()))
        return field, value
    return "key", None


class MongoRepository:
    """
    Async CRUD access to one collection.

    Attributes:
        collection: The pymongo AsyncCollection being wrapped.
    """

    def __init__(self, collection: AsyncCollection) -> None:
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    @contextmanager
    def _translate_errors(self, operation: str) -> Generator[None, None, None]:
        try:
            yield
        except DuplicateKeyError as e:
            field, value = _duplicate_field(e)
            raise DuplicateRecordError(field, value=value) from e
        except PyMongoError as e:
            raise RepositoryError(
                f"Failed to {operation} in {self.name}: {e}",
                collection=self.name,
            ) from e

    # =========================================================================
    # Create
    # =========================================================================

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document and return it as stored."""
        now = _utcnow()
        to_store = {k: v for k, v in document.items() if k not in PROTECTED_FIELDS}
        to_store["created_at"] = now
        to_store["updated_at"] = now

        with self._translate_errors("insert document"):
            result = await self.collection.insert_one(to_store)

        to_store["_id"] = result.inserted_id
        return serialize_document(to_store)

    # =========================================================================
    # Read
    # =========================================================================

    async def find_by_id(self, record_id: str) -> Optional[dict[str, Any]]:
        object_id = to_object_id(record_id)
        return await self.find_one({"_id": object_id})

    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        with self._translate_errors("find document"):
            document = await self.collection.find_one(query)
        return serialize_document(document)

    async def find(
        self,
        query: dict[str, Any],
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: int = 0,
        projection: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """
        Find documents matching a query.

        Args:
            query: Mongo filter document.
            sort: List of (field, direction) pairs.
            skip: Number of documents to skip.
            limit: Maximum documents to return (0 means no limit).
            projection: Optional field projection.

        Returns:
            Serialized documents in cursor order.
        """
        with self._translate_errors("find documents"):
            cursor = self.collection.find(query, projection)
            if sort:
                cursor = cursor.sort(sort)
            if skip:
                cursor = cursor.skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=None)
        return [serialize_document(doc) for doc in documents]

    async def count(self, query: dict[str, Any]) -> int:
        with self._translate_errors("count documents"):
            return await self.collection.count_documents(query)

    # =========================================================================
    # Update
    # =========================================================================

    async def update_by_id(
        self, record_id: str, changes: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        object_id = to_object_id(record_id)
        return await self.update_one({"_id": object_id}, changes)

    async def update_one(
        self, query: dict[str, Any], changes: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        """Apply ``$set`` with the given changes; returns the updated document."""
        to_set = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        to_set["updated_at"] = _utcnow()

        with self._translate_errors("update document"):
            document = await self.collection.find_one_and_update(
                query,
                {"$set": to_set},
                return_document=ReturnDocument.AFTER,
            )
        return serialize_document(document)

    # =========================================================================
    # Delete
    # =========================================================================

    async def delete_by_id(self, record_id: str) -> bool:
        object_id = to_object_id(record_id)
        return await self.delete_one({"_id": object_id})

    async def delete_one(self, query: dict[str, Any]) -> bool:
        with self._translate_errors("delete document"):
            result = await self.collection.delete_one(query)
        return result.deleted_count > 0
