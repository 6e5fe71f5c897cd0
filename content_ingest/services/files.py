"""
File Service

Uploads are written to local storage and described by a metadata record in
the ``files`` collection.
"""

import uuid
from pathlib import PurePath
from typing import Any, Optional

from content_ingest.core.exceptions import (
    ContentValidationError,
    NotFoundError,
    PayloadTooLargeError,
)
from content_ingest.db.repository import MongoRepository
from content_ingest.observability.logging import get_logger
from content_ingest.services.storage import LocalFileStorage

logger = get_logger(__name__)

ALLOWED_MIMETYPES = frozenset(
    {
        "application/pdf",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)
UNSUPPORTED_TYPE_MESSAGE = "File type not supported. Please upload PDF or DOCX files only."
NOT_FOUND_MESSAGE = "File not found"
ANONYMOUS_USER = "anonymous"


class FileService:
    """
    Attributes:
        repository: Metadata repository.
        storage: Where the bytes live.
        max_bytes: Largest accepted upload.
    """

    def __init__(
        self, repository: MongoRepository, storage: LocalFileStorage, max_bytes: int
    ) -> None:
        self.repository = repository
        self.storage = storage
        self.max_bytes = max_bytes

    def validate(self, mimetype: Optional[str], size: int) -> None:
        if mimetype not in ALLOWED_MIMETYPES:
            raise ContentValidationError(UNSUPPORTED_TYPE_MESSAGE, field="file", value=mimetype)
        if size > self.max_bytes:
            raise PayloadTooLargeError(
                f"File exceeds the {self.max_bytes} byte limit", limit=self.max_bytes
            )

    async def upload(
        self,
        original_name: str,
        mimetype: Optional[str],
        data: bytes,
        user_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Validate, store and record an upload.

        Raises:
            ContentValidationError: Unsupported mimetype.
            PayloadTooLargeError: Upload over the size limit.
            StorageError: The bytes could not be written.
        """
        self.validate(mimetype, len(data))

        owner = user_id or ANONYMOUS_USER
        suffix = PurePath(original_name).suffix.lower()
        key = f"{owner}/{uuid.uuid4()}{suffix}"
        path = await self.storage.save(key, data)

        record = await self.repository.insert(
            {
                "filename": key,
                "original_name": original_name,
                "path": path,
                "mimetype": mimetype,
                "size": len(data),
                "user_id": owner,
                "parsed": False,
                "parsed_content": None,
            }
        )
        logger.info("file uploaded", file_id=record["id"], size=len(data), user_id=owner)
        return record

    async def get(self, file_id: str) -> dict[str, Any]:
        record = await self.repository.find_by_id(file_id)
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="File", identifier=file_id)
        return record

    async def read(self, file_id: str) -> tuple[dict[str, Any], bytes]:
        record = await self.get(file_id)
        return record, await self.storage.read(record["filename"])

    async def delete(self, file_id: str) -> None:
        record = await self.get(file_id)
        await self.storage.delete(record["filename"])
        await self.repository.delete_by_id(file_id)
        logger.info("file deleted", file_id=file_id)

    async def list_for_user(self, user_id: str) -> list[dict[str, Any]]:
        return await self.repository.find({"user_id": user_id}, sort=[("created_at", -1)])
