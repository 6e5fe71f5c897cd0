"""Blogs Router - /api/blogs"""

from typing import Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_blog_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import BlogService

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get("", response_model=PaginatedResponse, summary="List blogs")
async def list_blogs(
    query: ListQuery = Depends(),
    sentiment: Optional[str] = None,
    complexity: Optional[str] = None,
    tag: Optional[str] = None,
    service: BlogService = Depends(get_blog_service),
) -> PaginatedResponse:
    filters = service.build_filter(sentiment=sentiment, complexity=complexity, tag=tag)
    return await service.list(query, filters)


register_item_routes(router, get_blog_service, "blog")
