"""Other Content Router - /api/others"""

from typing import Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_other_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import OtherService

router = APIRouter(prefix="/others", tags=["Others"])


@router.get("", response_model=PaginatedResponse, summary="List other content")
async def list_others(
    query: ListQuery = Depends(),
    sentiment: Optional[str] = None,
    complexity: Optional[str] = None,
    tag: Optional[str] = None,
    content_type: Optional[str] = None,
    service: OtherService = Depends(get_other_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        sentiment=sentiment, complexity=complexity, tag=tag, content_type=content_type
    )
    return await service.list(query, filters)


@router.get("/type/{content_type}", response_model=PaginatedResponse)
async def list_others_by_type(
    content_type: str,
    query: ListQuery = Depends(),
    service: OtherService = Depends(get_other_service),
) -> PaginatedResponse:
    return await service.list_by_type(content_type, query)


@router.get("/complexity/{level}", response_model=PaginatedResponse)
async def list_others_by_complexity(
    level: str,
    query: ListQuery = Depends(),
    service: OtherService = Depends(get_other_service),
) -> PaginatedResponse:
    return await service.list_by_complexity(level, query)


register_item_routes(router, get_other_service, "content")
