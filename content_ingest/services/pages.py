"""
Page Content Service

Stores captured pages keyed by URL. Pages are analyzed after they are saved;
see IngestionService.analyze_page_content.
"""

import re
from typing import Any, Optional
from urllib.parse import urlsplit

from content_ingest.core.exceptions import ConflictError, DuplicateRecordError, NotFoundError
from content_ingest.db.repository import MongoRepository
from content_ingest.models.pages import PageContent, PageContentUpdate
from content_ingest.observability.logging import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Content not found"
DUPLICATE_URL_MESSAGE = "Content for this URL already exists"

_WHITESPACE_RE = re.compile(r"\s+")


def derive_base_url(url: str) -> str:
    """scheme://host for absolute URLs; the URL itself otherwise."""
    parts = urlsplit(url)
    if parts.scheme and parts.hostname:
        return f"{parts.scheme}://{parts.hostname}"
    return url


def clean_content(content: PageContent) -> PageContent:
    """Collapse whitespace in the text, trim title and html, fill in baseurl."""
    return content.model_copy(
        update={
            "text": _WHITESPACE_RE.sub(" ", content.text).strip(),
            "title": content.title.strip(),
            "html": content.html.strip(),
            "baseurl": content.baseurl or derive_base_url(content.url),
        }
    )


class PageContentService:
    """CRUD for page content, addressed by URL or by id."""

    def __init__(self, repository: MongoRepository) -> None:
        self.repository = repository

    async def create(self, content: PageContent) -> dict[str, Any]:
        """
        Save a page.

        Raises:
            ConflictError: If a page with the same URL is already stored.
        """
        if await self.repository.find_one({"url": content.url}) is not None:
            raise ConflictError(DUPLICATE_URL_MESSAGE, field="url")

        try:
            record = await self.repository.insert(clean_content(content).model_dump())
        except DuplicateRecordError as e:
            raise ConflictError(DUPLICATE_URL_MESSAGE, field="url") from e
        logger.info("page content saved", record_id=record["id"], url=record["url"])
        return record

    async def list_links(self) -> list[str]:
        documents = await self.repository.find({}, projection={"url": 1})
        return [doc["url"] for doc in documents if doc.get("url")]

    async def get_by_id(self, record_id: str) -> dict[str, Any]:
        record = await self.repository.find_by_id(record_id)
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="PageContent", identifier=record_id)
        return record

    async def get_by_url(self, url: str) -> dict[str, Any]:
        record = await self.repository.find_one({"url": url})
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="PageContent", identifier=url)
        return record

    async def update_by_url(self, url: str, changes: PageContentUpdate) -> dict[str, Any]:
        to_set = changes.model_dump(exclude_unset=True, exclude_none=True)
        if "text" in to_set:
            to_set["text"] = _WHITESPACE_RE.sub(" ", to_set["text"]).strip()
        if not to_set:
            return await self.get_by_url(url)

        record = await self.repository.update_one({"url": url}, to_set)
        if record is None:
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="PageContent", identifier=url)
        return record

    async def delete_by_url(self, url: str) -> None:
        if not await self.repository.delete_one({"url": url}):
            raise NotFoundError(NOT_FOUND_MESSAGE, resource="PageContent", identifier=url)

    async def record_analysis(
        self,
        record_id: str,
        analysis: dict[str, Any],
        content_type: Optional[str] = None,
    ) -> Optional[dict[str, Any]]:
        """Attach the outcome of classification to a stored page."""
        changes: dict[str, Any] = {"analysis": analysis}
        if content_type:
            changes["content_type"] = content_type
        return await self.repository.update_by_id(record_id, changes)
