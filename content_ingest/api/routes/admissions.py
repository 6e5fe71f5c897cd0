"""Admissions Router - /api/admissions"""

from typing import Any, Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_admission_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import AdmissionService

router = APIRouter(prefix="/admissions", tags=["Admissions"])


@router.get("", response_model=PaginatedResponse, summary="List admissions")
async def list_admissions(
    query: ListQuery = Depends(),
    university: Optional[str] = None,
    degree: Optional[str] = None,
    language_of_instruction: Optional[str] = None,
    service: AdmissionService = Depends(get_admission_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        university=university,
        degree=degree,
        language_of_instruction=language_of_instruction,
    )
    return await service.list(query, filters)


@router.get("/upcoming-deadlines", summary="Deadlines in the next 30 days")
async def list_upcoming_deadlines(
    service: AdmissionService = Depends(get_admission_service),
) -> list[dict[str, Any]]:
    return await service.list_upcoming_deadlines()


@router.get("/university/{university}", response_model=PaginatedResponse)
async def list_admissions_by_university(
    university: str,
    query: ListQuery = Depends(),
    service: AdmissionService = Depends(get_admission_service),
) -> PaginatedResponse:
    return await service.list_by_university(university, query)


@router.get("/degree/{degree}", response_model=PaginatedResponse)
async def list_admissions_by_degree(
    degree: str,
    query: ListQuery = Depends(),
    service: AdmissionService = Depends(get_admission_service),
) -> PaginatedResponse:
    return await service.list_by_degree(degree, query)


register_item_routes(router, get_admission_service, "admission")
