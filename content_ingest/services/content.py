"""
Entity services for the content collections.

EntityService holds the CRUD and pagination logic shared by every
collection; subclasses name their schema and not-found label and translate
query-string criteria into Mongo filters.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from content_ingest.core.exceptions import ContentValidationError, NotFoundError
from content_ingest.db.repository import MongoRepository
from content_ingest.models.common import (
    COMPLEXITY_LEVEL_VALUES,
    COMPLEXITY_VALUES,
    EntityModel,
)
from content_ingest.models.content import (
    Admission,
    Blog,
    JobDescription,
    News,
    Other,
    Scholarship,
    Technical,
    normalize_job_type,
)
from content_ingest.models.requests import ListQuery
from content_ingest.models.responses import PaginatedResponse
from content_ingest.observability.logging import get_logger

logger = get_logger(__name__)

INVALID_COMPLEXITY_MESSAGE = "Invalid complexity level"


def _compact(criteria: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in criteria.items() if value not in (None, "")}


class EntityService:
    """
    CRUD over one collection, validated by one schema.

    Attributes:
        model: Pydantic schema for the stored document.
        label: Human name used in not-found messages.
        repository: Repository for the collection.
    """

    model: type[EntityModel] = EntityModel
    label: str = "Record"

    def __init__(self, repository: MongoRepository) -> None:
        self.repository = repository

    def _not_found(self, identifier: str) -> NotFoundError:
        return NotFoundError(
            f"{self.label} not found", resource=self.label, identifier=identifier
        )

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Validate and insert a record.

        Raises:
            pydantic.ValidationError: If the data does not satisfy the schema.
        """
        payload = self.model.model_validate(data)
        record = await self.repository.insert(payload.model_dump())
        logger.info("record created", collection=self.repository.name, record_id=record["id"])
        return record

    async def get(self, record_id: str) -> dict[str, Any]:
        record = await self.repository.find_by_id(record_id)
        if record is None:
            raise self._not_found(record_id)
        return record

    async def update(self, record_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """
        Apply a partial update.

        The stored record is merged with the changes and validated as a whole,
        then only the changed fields are written.
        """
        existing = await self.get(record_id)
        validated = self.model.model_validate({**existing, **changes}).model_dump()
        to_set = {key: validated[key] for key in changes if key in validated}
        if not to_set:
            return existing

        updated = await self.repository.update_by_id(record_id, to_set)
        if updated is None:
            raise self._not_found(record_id)
        return updated

    async def delete(self, record_id: str) -> None:
        deleted = await self.repository.delete_by_id(record_id)
        if not deleted:
            raise self._not_found(record_id)
        logger.info("record deleted", collection=self.repository.name, record_id=record_id)

    async def list(
        self, query: ListQuery, filters: Optional[dict[str, Any]] = None
    ) -> PaginatedResponse:
        """Return one page of records matching ``filters``."""
        filters = filters or {}
        total = await self.repository.count(filters)
        results = await self.repository.find(
            filters, sort=query.sort, skip=query.skip, limit=query.limit
        )
        return PaginatedResponse.build(results, query.page, query.limit, total)

    def build_filter(self, **criteria: Any) -> dict[str, Any]:
        """Equality filter from the non-empty criteria."""
        return _compact(criteria)


# =============================================================================
# Job Descriptions
# =============================================================================


class JobDescriptionService(EntityService):
    model = JobDescription
    label = "Job description"

    def build_filter(
        self,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
        workplace: Optional[str] = None,
        tech_stack: Optional[str] = None,
        min_experience: Optional[int] = None,
    ) -> dict[str, Any]:
        filters = _compact({"status": status, "workplace": workplace})
        if job_type:
            filters["job_type"] = normalize_job_type(job_type)
        if tech_stack:
            filters["tech_stack"] = {"$in": [tech_stack]}
        if min_experience is not None:
            filters["professional_experience"] = {"$gte": min_experience}
        return filters

    async def list_active(self, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"status": "active"})


# =============================================================================
# Scholarships
# =============================================================================


class ScholarshipService(EntityService):
    model = Scholarship
    label = "Scholarship"

    def build_filter(
        self,
        status: Optional[str] = None,
        country: Optional[str] = None,
        degree_level: Optional[str] = None,
        field_of_study: Optional[str] = None,
    ) -> dict[str, Any]:
        filters = _compact({"status": status, "country": country})
        if degree_level:
            filters["degree_level"] = {"$in": [degree_level]}
        if field_of_study:
            filters["field_of_study"] = {"$in": [field_of_study]}
        return filters

    async def list_active(self, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"status": "active"})

    async def list_by_country(self, country: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"country": country})


# =============================================================================
# Blogs and News
# =============================================================================


class BlogService(EntityService):
    model = Blog
    label = "Blog"

    def build_filter(
        self,
        sentiment: Optional[str] = None,
        complexity: Optional[str] = None,
        tag: Optional[str] = None,
        **extra: Any,
    ) -> dict[str, Any]:
        filters = _compact({"sentiment": sentiment, "complexity": complexity, **extra})
        if tag:
            filters["tags"] = {"$in": [tag]}
        return filters


class NewsService(BlogService):
    model = News
    label = "News article"

    def build_filter(
        self,
        sentiment: Optional[str] = None,
        complexity: Optional[str] = None,
        tag: Optional[str] = None,
        category: Optional[str] = None,
        region: Optional[str] = None,
    ) -> dict[str, Any]:
        return super().build_filter(
            sentiment=sentiment,
            complexity=complexity,
            tag=tag,
            category=category,
            region=region,
        )

    async def list_breaking(self, limit: int = 5) -> list[dict[str, Any]]:
        """Newest breaking stories first."""
        return await self.repository.find(
            {"is_breaking": True}, sort=[("created_at", -1)], limit=limit
        )

    async def list_by_category(self, category: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"category": category})


# =============================================================================
# Technical Documents
# =============================================================================


class TechnicalService(EntityService):
    model = Technical
    label = "Technical document"

    def build_filter(
        self,
        sentiment: Optional[str] = None,
        complexity: Optional[str] = None,
        tag: Optional[str] = None,
        technology: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> dict[str, Any]:
        filters = _compact(
            {
                "sentiment": sentiment,
                "complexity_level": complexity,
                "technology": technology,
                "content_type": content_type,
            }
        )
        if tag:
            filters["tags"] = {"$in": [tag]}
        return filters

    async def list_by_technology(self, technology: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"technology": technology})

    async def list_by_complexity(self, level: str, query: ListQuery) -> PaginatedResponse:
        if level not in COMPLEXITY_LEVEL_VALUES:
            raise ContentValidationError(
                INVALID_COMPLEXITY_MESSAGE, field="complexity_level", value=level
            )
        return await self.list(query, {"complexity_level": level})


# =============================================================================
# Other
# =============================================================================


class OtherService(EntityService):
    model = Other
    label = "Content"

    def build_filter(
        self,
        sentiment: Optional[str] = None,
        complexity: Optional[str] = None,
        tag: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> dict[str, Any]:
        filters = _compact(
            {"sentiment": sentiment, "complexity": complexity, "content_type": content_type}
        )
        if tag:
            filters["tags"] = {"$in": [tag]}
        return filters

    async def list_by_type(self, content_type: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"content_type": content_type})

    async def list_by_complexity(self, level: str, query: ListQuery) -> PaginatedResponse:
        if level not in COMPLEXITY_VALUES:
            raise ContentValidationError(
                INVALID_COMPLEXITY_MESSAGE, field="complexity", value=level
            )
        return await self.list(query, {"complexity": level})


# =============================================================================
# Admissions
# =============================================================================


class AdmissionService(EntityService):
    model = Admission
    label = "Admission"

    UPCOMING_WINDOW_DAYS = 30

    def build_filter(
        self,
        university: Optional[str] = None,
        degree: Optional[str] = None,
        language_of_instruction: Optional[str] = None,
    ) -> dict[str, Any]:
        return _compact(
            {
                "university": university,
                "degree": degree,
                "language_of_instruction": language_of_instruction,
            }
        )

    async def list_by_university(self, university: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"university": university})

    async def list_by_degree(self, degree: str, query: ListQuery) -> PaginatedResponse:
        return await self.list(query, {"degree": degree})

    async def list_upcoming_deadlines(
        self, now: Optional[datetime] = None
    ) -> list[dict[str, Any]]:
        """Admissions whose deadline falls within the next 30 days, soonest first."""
        start = now or datetime.now(timezone.utc)
        end = start + timedelta(days=self.UPCOMING_WINDOW_DAYS)
        return await self.repository.find(
            {"application_deadline": {"$gte": start, "$lte": end}},
            sort=[("application_deadline", 1)],
        )
