"""
Page Content Router - /api/page-content

Captured pages are stored by URL. Saving a page schedules its
classification as a background task; the outcome is written back onto the
page under ``analysis``.
"""

import logging
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Depends, status

from content_ingest.api.deps import get_ingestion_service, get_page_content_service
from content_ingest.models.pages import PageContent, PageContentUpdate
from content_ingest.services.ingestion import IngestionService
from content_ingest.services.pages import PageContentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/page-content", tags=["Page Content"])

SAVED_MESSAGE = "Content saved successfully"
DELETED_MESSAGE = "Content deleted successfully"


@router.post("", status_code=status.HTTP_201_CREATED, summary="Save page content")
async def save_page_content(
    content: PageContent,
    background_tasks: BackgroundTasks,
    service: PageContentService = Depends(get_page_content_service),
    ingestion: IngestionService = Depends(get_ingestion_service),
) -> dict[str, Any]:
    """
    Save a page and queue its analysis.

    Returns 409 when the URL is already stored.
    """
    record = await service.create(content)
    background_tasks.add_task(ingestion.analyze_page_content_in_background, record["id"])
    logger.info(f"Queued analysis for page {record['id']}")
    return {"success": True, "data": record, "message": SAVED_MESSAGE}


@router.get("", summary="List stored page URLs")
async def list_page_links(
    service: PageContentService = Depends(get_page_content_service),
) -> dict[str, Any]:
    return {"success": True, "links": await service.list_links()}


@router.get("/id/{record_id}", summary="Get page content by id")
async def get_page_content_by_id(
    record_id: str,
    service: PageContentService = Depends(get_page_content_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.get_by_id(record_id)}


@router.get("/{url:path}", summary="Get page content by URL")
async def get_page_content(
    url: str,
    service: PageContentService = Depends(get_page_content_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.get_by_url(url)}


@router.put("/{url:path}", summary="Update page content by URL")
async def update_page_content(
    url: str,
    changes: PageContentUpdate,
    service: PageContentService = Depends(get_page_content_service),
) -> dict[str, Any]:
    return {"success": True, "data": await service.update_by_url(url, changes)}


@router.delete("/{url:path}", summary="Delete page content by URL")
async def delete_page_content(
    url: str,
    service: PageContentService = Depends(get_page_content_service),
) -> dict[str, Any]:
    await service.delete_by_url(url)
    return {"success": True, "message": DELETED_MESSAGE}
