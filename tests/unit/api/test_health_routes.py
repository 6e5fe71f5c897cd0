"""
Tests for the health router.

/health is static; /health/ready is driven through a HealthService built
from mocked dependencies.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from content_ingest import __version__
from content_ingest.api.routes.health import HealthService, get_health_service
from content_ingest.api.routes.health import router as health_router


def ready_service(mongo_ok: bool = True, redis_ok: bool = True, with_cache: bool = True):
    mongo = AsyncMock()
    mongo.ping.return_value = mongo_ok
    cache = None
    if with_cache:
        cache = AsyncMock()
        cache.ping.return_value = redis_ok
    return HealthService(mongo=mongo, cache=cache)


class TestHealthEndpoint:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_router_type(self):
        assert isinstance(health_router, APIRouter)


class TestReadinessEndpoint:
    def test_ready(self, app, client: TestClient):
        app.dependency_overrides[get_health_service] = ready_service

        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "checks": {"mongodb": True, "redis": True}}

    def test_mongo_down(self, app, client: TestClient):
        app.dependency_overrides[get_health_service] = lambda: ready_service(mongo_ok=False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
        assert response.json()["checks"]["mongodb"] is False

    def test_redis_down(self, app, client: TestClient):
        app.dependency_overrides[get_health_service] = lambda: ready_service(redis_ok=False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["redis"] is False

    def test_without_started_app(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["mongodb"] is False


class TestHealthService:
    @pytest.mark.asyncio
    async def test_cache_disabled_counts_as_healthy(self):
        service = ready_service(with_cache=False)

        assert await service.checks() == {"mongodb": True, "redis": True}

    @pytest.mark.asyncio
    async def test_no_mongo(self):
        assert await HealthService().check_mongo() is False
