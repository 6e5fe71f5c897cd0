"""
Tests for FileService and LocalFileStorage, using pytest's tmp_path.
"""

import pytest

from content_ingest.core.exceptions import (
    ContentValidationError,
    NotFoundError,
    PayloadTooLargeError,
    StorageError,
)
from content_ingest.services.files import UNSUPPORTED_TYPE_MESSAGE, FileService
from content_ingest.services.storage import LocalFileStorage

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(tmp_path)


@pytest.fixture
def service(repository_factory, storage):
    return FileService(repository_factory("files"), storage, max_bytes=1024)


class TestLocalFileStorage:
    @pytest.mark.asyncio
    async def test_save_read_delete(self, storage, tmp_path):
        path = await storage.save("user-1/doc.pdf", b"%PDF-1.4")

        assert path == str((tmp_path / "user-1" / "doc.pdf").resolve())
        assert await storage.read("user-1/doc.pdf") == b"%PDF-1.4"

        await storage.delete("user-1/doc.pdf")
        assert not (tmp_path / "user-1" / "doc.pdf").exists()

    @pytest.mark.asyncio
    async def test_delete_missing_file_is_ignored(self, storage):
        await storage.delete("nothing/here.pdf")

    @pytest.mark.asyncio
    async def test_read_missing_file(self, storage):
        with pytest.raises(StorageError):
            await storage.read("nothing/here.pdf")

    def test_rejects_path_traversal(self, storage):
        with pytest.raises(StorageError):
            storage.resolve("../outside.pdf")


class TestUpload:
    @pytest.mark.asyncio
    async def test_upload_pdf(self, service, storage):
        record = await service.upload("CV.PDF", PDF, b"%PDF-1.4", user_id="user-1")

        assert record["original_name"] == "CV.PDF"
        assert record["filename"].startswith("user-1/")
        assert record["filename"].endswith(".pdf")
        assert record["size"] == 8
        assert record["parsed"] is False
        assert await storage.read(record["filename"]) == b"%PDF-1.4"

    @pytest.mark.asyncio
    async def test_upload_without_user(self, service):
        record = await service.upload("cv.docx", DOCX, b"PK")

        assert record["user_id"] == "anonymous"

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, service):
        with pytest.raises(ContentValidationError) as exc_info:
            await service.upload("notes.txt", "text/plain", b"hello")
        assert exc_info.value.message == UNSUPPORTED_TYPE_MESSAGE

    @pytest.mark.asyncio
    async def test_rejects_oversized_upload(self, service):
        with pytest.raises(PayloadTooLargeError) as exc_info:
            await service.upload("big.pdf", PDF, b"x" * 1025)
        assert exc_info.value.http_status == 413


class TestReadDelete:
    @pytest.mark.asyncio
    async def test_read(self, service):
        record = await service.upload("cv.pdf", PDF, b"%PDF", user_id="u")

        stored, data = await service.read(record["id"])

        assert stored["mimetype"] == PDF
        assert data == b"%PDF"

    @pytest.mark.asyncio
    async def test_delete_removes_bytes_and_record(self, service, storage):
        record = await service.upload("cv.pdf", PDF, b"%PDF", user_id="u")

        await service.delete(record["id"])

        with pytest.raises(NotFoundError, match="File not found"):
            await service.get(record["id"])
        assert not storage.resolve(record["filename"]).exists()

    @pytest.mark.asyncio
    async def test_list_for_user(self, service):
        await service.upload("a.pdf", PDF, b"a", user_id="u1")
        await service.upload("b.pdf", PDF, b"b", user_id="u2")

        files = await service.list_for_user("u1")

        assert [f["original_name"] for f in files] == ["a.pdf"]
