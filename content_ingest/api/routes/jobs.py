"""
Job Descriptions Router - /api/jobs

List with filters, the active-jobs view, and the shared item routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from content_ingest.api.deps import get_job_service
from content_ingest.api.routes.crud import register_item_routes
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.services.content import JobDescriptionService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.get("", response_model=PaginatedResponse, summary="List job descriptions")
async def list_jobs(
    query: ListQuery = Depends(),
    status: Optional[str] = None,
    job_type: Optional[str] = None,
    workplace: Optional[str] = None,
    tech_stack: Optional[str] = None,
    min_experience: Optional[int] = Query(default=None, ge=0),
    service: JobDescriptionService = Depends(get_job_service),
) -> PaginatedResponse:
    filters = service.build_filter(
        status=status,
        job_type=job_type,
        workplace=workplace,
        tech_stack=tech_stack,
        min_experience=min_experience,
    )
    return await service.list(query, filters)


@router.get("/active", response_model=PaginatedResponse, summary="List active jobs")
async def list_active_jobs(
    query: ListQuery = Depends(),
    service: JobDescriptionService = Depends(get_job_service),
) -> PaginatedResponse:
    return await service.list_active(query)


register_item_routes(router, get_job_service, "job description")
