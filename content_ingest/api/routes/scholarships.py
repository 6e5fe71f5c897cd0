"""Scholarships Router - /api/scholarships"""

from typing import Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_scholarship_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import ScholarshipService

router = APIRouter(prefix="/scholarships", tags=["Scholarships"])


@router.get("", response_model=PaginatedResponse, summary="List scholarships")
async def list_scholarships(
    query: ListQuery = Depends(),
    status: Optional[str] = None,
    country: Optional[str] = None,
    degree_level: Optional[str] = None,
    field_of_study: Optional[str] = None,
    service: ScholarshipService = Depends(get_scholarship_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        status=status,
        country=country,
        degree_level=degree_level,
        field_of_study=field_of_study,
    )
    return await service.list(query, filters)


@router.get("/active", response_model=PaginatedResponse)
async def list_active_scholarships(
    query: ListQuery = Depends(),
    service: ScholarshipService = Depends(get_scholarship_service),
) -> PaginatedResponse:
    return await service.list_active(query)


@router.get("/country/{country}", response_model=PaginatedResponse)
async def list_scholarships_by_country(
    country: str,
    query: ListQuery = Depends(),
    service: ScholarshipService = Depends(get_scholarship_service),
) -> PaginatedResponse:
    return await service.list_by_country(country, query)


register_item_routes(router, get_scholarship_service, "scholarship")
