"""
News Router - /api/news

Breaking news is a short, unpaginated list; everything else pages like the
other categories.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from content_ingest.api.deps import get_news_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import NewsService

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=PaginatedResponse, summary="List news articles")
async def list_news(
    query: ListQuery = Depends(),
    sentiment: Optional[str] = None,
    complexity: Optional[str] = None,
    tag: Optional[str] = None,
    category: Optional[str] = None,
    region: Optional[str] = None,
    service: NewsService = Depends(get_news_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        sentiment=sentiment,
        complexity=complexity,
        tag=tag,
        category=category,
        region=region,
    )
    return await service.list(query, filters)


@router.get("/breaking", summary="Latest breaking news")
async def list_breaking_news(
    limit: int = Query(default=5, ge=1, le=100),
    service: NewsService = Depends(get_news_service),
) -> list[dict[str, Any]]:
    return await service.list_breaking(limit)


@router.get("/category/{category}", response_model=PaginatedResponse)
async def list_news_by_category(
    category: str,
    query: ListQuery = Depends(),
    service: NewsService = Depends(get_news_service),
) -> PaginatedResponse:
    return await service.list_by_category(category, query)


register_item_routes(router, get_news_service, "news article")
