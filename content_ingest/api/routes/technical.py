"""Technical Documents Router - /api/technical"""

from typing import Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_technical_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import TechnicalService

router = APIRouter(prefix="/technical", tags=["Technical"])


@router.get("", response_model=PaginatedResponse, summary="List technical documents")
async def list_technical(
    query: ListQuery = Depends(),
    sentiment: Optional[str] = None,
    complexity: Optional[str] = None,
    tag: Optional[str] = None,
    technology: Optional[str] = None,
    content_type: Optional[str] = None,
    service: TechnicalService = Depends(get_technical_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        sentiment=sentiment,
        complexity=complexity,
        tag=tag,
        technology=technology,
        content_type=content_type,
    )
    return await service.list(query, filters)


@router.get("/technology/{technology}", response_model=PaginatedResponse)
async def list_technical_by_technology(
    technology: str,
    query: ListQuery = Depends(),
    service: TechnicalService = Depends(get_technical_service),
) -> PaginatedResponse:
    return await service.list_by_technology(technology, query)


@router.get("/complexity/{level}", response_model=PaginatedResponse)
async def list_technical_by_complexity(
    level: str,
    query: ListQuery = Depends(),
    service: TechnicalService = Depends(get_technical_service),
) -> PaginatedResponse:
    """Levels: beginner, intermediate, advanced. Anything else is a 400."""
    return await service.list_by_complexity(level, query)


register_item_routes(router, get_technical_service, "technical document")
