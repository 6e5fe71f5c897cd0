"""
Pytest configuration for the test suite.

This configuration sets up:
- Test markers for categorization
- FakeRedis and FakeProvider fixtures
- An in-memory FakeRepository with the MongoRepository interface, so
  services and routes are tested without a database
- A TestClient for the full application with its dependencies overridden
"""

import copy
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional
from unittest.mock import AsyncMock, MagicMock

import fakeredis.aioredis
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from content_ingest.db.repository import PROTECTED_FIELDS, to_object_id  # noqa: E402


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """
    Register custom markers for test categorization.

    - unit: Tests for individual components
    - integration: Tests for service interactions
    - e2e: End-to-end workflow tests
    - slow: Tests that take a long time to run
    """
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for service interactions")
    config.addinivalue_line("markers", "e2e: End-to-end workflow tests")
    config.addinivalue_line("markers", "slow: Tests that take a long time to run")


# =============================================================================
# FakeRepository
# =============================================================================


def _matches_condition(actual: Any, condition: Any) -> bool:
    if isinstance(condition, dict):
        for operator, expected in condition.items():
            if operator == "$in":
                values = actual if isinstance(actual, list) else [actual]
                if not any(value in expected for value in values):
                    return False
            elif operator == "$gte":
                if actual is None or actual < expected:
                    return False
            elif operator == "$lte":
                if actual is None or actual > expected:
                    return False
            else:
                raise NotImplementedError(f"FakeRepository does not support {operator}")
        return True
    if isinstance(actual, list) and not isinstance(condition, list):
        return condition in actual
    return actual == condition


class FakeRepository:
    """
    In-memory stand-in for MongoRepository.

    Supports equality, $in, $gte and $lte filters, sort, skip, limit and
    projection. Ids are ObjectId strings, so malformed ids fail the same way
    they do against MongoDB.
    """

    def __init__(self, name: str = "fake", unique_fields: tuple[str, ...] = ()) -> None:
        self.name = name
        self.unique_fields = unique_fields
        self.documents: dict[str, dict[str, Any]] = {}

    def _matches(self, document: dict[str, Any], query: dict[str, Any]) -> bool:
        for field, condition in query.items():
            if field == "_id":
                if document["id"] != str(condition):
                    return False
            elif not _matches_condition(document.get(field), condition):
                return False
        return True

    def _select(self, query: dict[str, Any]) -> list[dict[str, Any]]:
        return [doc for doc in self.documents.values() if self._matches(doc, query)]

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        from content_ingest.core.exceptions import DuplicateRecordError

        for field in self.unique_fields:
            if any(doc.get(field) == document.get(field) for doc in self.documents.values()):
                raise DuplicateRecordError(field, value=document.get(field))

        now = datetime.now(timezone.utc)
        stored = {k: copy.deepcopy(v) for k, v in document.items() if k not in PROTECTED_FIELDS}
        stored["id"] = str(ObjectId())
        stored["created_at"] = now
        stored["updated_at"] = now
        self.documents[stored["id"]] = stored
        return copy.deepcopy(stored)

    async def find_by_id(self, record_id: str) -> Optional[dict[str, Any]]:
        object_id = to_object_id(record_id)
        document = self.documents.get(str(object_id))
        return copy.deepcopy(document) if document else None

    async def find_one(self, query: dict[str, Any]) -> Optional[dict[str, Any]]:
        found = self._select(query)
        return copy.deepcopy(found[0]) if found else None

    async def find(
        self,
        query: dict[str, Any],
        sort: Optional[list[tuple[str, int]]] = None,
        skip: int = 0,
        limit: int = 0,
        projection: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        found = self._select(query)
        for field, direction in reversed(sort or []):
            found.sort(key=lambda doc: (doc.get(field) is None, doc.get(field)), reverse=direction < 0)
        found = found[skip:]
        if limit:
            found = found[:limit]
        if projection:
            keep = {field for field, include in projection.items() if include}
            found = [{k: v for k, v in doc.items() if k in keep or k == "id"} for doc in found]
        return copy.deepcopy(found)

    async def count(self, query: dict[str, Any]) -> int:
        return len(self._select(query))

    async def update_one(
        self, query: dict[str, Any], changes: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        found = self._select(query)
        if not found:
            return None
        document = found[0]
        document.update(
            {k: copy.deepcopy(v) for k, v in changes.items() if k not in PROTECTED_FIELDS}
        )
        document["updated_at"] = datetime.now(timezone.utc)
        return copy.deepcopy(document)

    async def update_by_id(
        self, record_id: str, changes: dict[str, Any]
    ) -> Optional[dict[str, Any]]:
        return await self.update_one({"_id": to_object_id(record_id)}, changes)

    async def delete_one(self, query: dict[str, Any]) -> bool:
        found = self._select(query)
        if not found:
            return False
        del self.documents[found[0]["id"]]
        return True

    async def delete_by_id(self, record_id: str) -> bool:
        return await self.delete_one({"_id": to_object_id(record_id)})


@pytest.fixture
def fake_repository():
    """Empty FakeRepository."""
    return FakeRepository()


@pytest.fixture
def repository_factory():
    """Build FakeRepositories: repository_factory("users", unique_fields=("email",))."""
    return FakeRepository


# =============================================================================
# Redis, Settings, Provider
# =============================================================================


@pytest.fixture
def fake_redis():
    """
    Create a fake Redis client for testing.

    fakeredis provides a Redis-compatible interface without a real server.
    """
    return fakeredis.aioredis.FakeRedis(decode_responses=True)


@pytest.fixture
def test_settings():
    """Settings with safe defaults: no real services, no API key."""
    from content_ingest.core.config import Settings

    return Settings(
        service_name="content-ingest-test",
        environment="development",
        mongodb_url="mongodb://localhost:27017",
        mongodb_database="content_ingest_test",
        redis_url="redis://localhost:6379",
        openai_api_key="",
        llm_retry_delay_seconds=0.0,
    )


@pytest.fixture
def fake_provider():
    """FakeProvider with no queued responses (answers with an "other" record)."""
    from content_ingest.providers.fake import FakeProvider

    return FakeProvider()


@pytest.fixture
def mock_collection():
    """
    MagicMock AsyncCollection.

    The coroutine methods are AsyncMocks; ``find`` returns a cursor whose
    sort/skip/limit chain back to itself.
    """
    collection = MagicMock()
    collection.name = "blogs"
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.find_one_and_update = AsyncMock(return_value=None)
    collection.delete_one = AsyncMock()
    collection.count_documents = AsyncMock(return_value=0)

    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    collection.cursor = cursor
    return collection


# =============================================================================
# Application
# =============================================================================


@pytest.fixture
def app():
    """The application, with dependency overrides and lifespan state cleared after each test."""
    from content_ingest.main import app as application

    yield application
    application.dependency_overrides.clear()
    for name in ("mongo", "analysis_cache", "provider", "reader"):
        if hasattr(application.state, name):
            delattr(application.state, name)


@pytest.fixture
def client(app):
    """
    TestClient for the full application.

    The lifespan is not entered, so no database or Redis connection is
    made; tests override the service dependencies they use.
    """
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_job():
    return {
        "company_title": "Acme Corp",
        "job_position": "Senior Backend Engineer",
        "job_location": "Berlin",
        "job_type": "Full-Time",
        "workplace": "Remote",
        "professional_experience": "5+ years",
        "tech_stack": ["python", "mongodb"],
        "responsibilities": ["Build ingestion pipelines"],
    }


@pytest.fixture
def sample_blog():
    return {
        "title": "Scaling FastAPI",
        "author": "Jane Doe",
        "publication_date": "March 1, 2025",
        "source": "https://example.com/blog/scaling-fastapi",
        "summary": "How to scale a FastAPI service.",
        "key_points": ["Use async drivers"],
        "topics_covered": ["fastapi", "performance"],
        "target_audience": "Backend developers",
        "tags": ["python"],
        "sentiment": "positive",
        "complexity": "intermediate",
        "readability_score": 72,
    }
