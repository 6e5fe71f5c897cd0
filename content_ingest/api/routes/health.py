"""
Health Router

- GET /health        liveness: the process is up
- GET /health/ready  readiness: MongoDB answers a ping, and so does Redis
                     when the analysis cache is enabled; 503 otherwise
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from content_ingest import __version__
from content_ingest.db.mongo import MongoConnection
from content_ingest.services.cache import AnalysisCache

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    checks: dict[str, bool]


class HealthService:
    """
    Dependency checks behind /health/ready.

    Attributes:
        mongo: Connection to ping, or None when the app has not started it.
        cache: Analysis cache to ping, or None when caching is disabled.
    """

    def __init__(
        self,
        mongo: Optional[MongoConnection] = None,
        cache: Optional[AnalysisCache] = None,
    ) -> None:
        self._mongo = mongo
        self._cache = cache

    async def check_mongo(self) -> bool:
        if self._mongo is None:
            logger.warning("MongoDB connection not initialized")
            return False
        return await self._mongo.ping()

    async def check_redis(self) -> bool:
        """Redis is optional: with the cache disabled there is nothing to check."""
        if self._cache is None:
            return True
        healthy = await self._cache.ping()
        if not healthy:
            logger.warning("Redis health check failed")
        return healthy

    async def checks(self) -> dict[str, bool]:
        return {
            "mongodb": await self.check_mongo(),
            "redis": await self.check_redis(),
        }


def get_health_service(request: Request) -> HealthService:
    state = request.app.state
    return HealthService(
        mongo=getattr(state, "mongo", None),
        cache=getattr(state, "analysis_cache", None),
    )


router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__)


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    health_service: HealthService = Depends(get_health_service),
) -> ReadinessResponse:
    checks = await health_service.checks()
    all_healthy = all(checks.values())

    if not all_healthy:
        response.status_code = 503

    return ReadinessResponse(
        status="ready" if all_healthy else "not_ready",
        checks=checks,
    )
