"""
Ingestion Service - classify text and persist it in the matching collection.

Flow:
    text -> analysis cache (Redis) or ContentAnalyzer.analyze_content
         -> category resolution
         -> category EntityService.create (full schema validation)

Pages saved through the page-content API are analyzed in the background with
``analyze_page_content``; its outcome is written back onto the page.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from content_ingest.core.exceptions import ContentIngestException
from content_ingest.models.content import CATEGORY_MODELS, ContentCategory
from content_ingest.models.responses import IngestionResult
from content_ingest.observability.logging import get_logger
from content_ingest.services.analysis import ContentAnalyzer
from content_ingest.services.cache import AnalysisCache, CacheError
from content_ingest.services.content import EntityService
from content_ingest.services.pages import PageContentService

logger = get_logger(__name__)

CATEGORY_ALIASES: dict[str, ContentCategory] = {
    "job": ContentCategory.JOB,
    "jobs": ContentCategory.JOB,
    "job description": ContentCategory.JOB,
    "job posting": ContentCategory.JOB,
    "job_description": ContentCategory.JOB,
    "jobdescription": ContentCategory.JOB,
    "scholarship": ContentCategory.SCHOLARSHIP,
    "admission": ContentCategory.SCHOLARSHIP,
    "university admission": ContentCategory.SCHOLARSHIP,
    "blog": ContentCategory.BLOG,
    "article": ContentCategory.BLOG,
    "news": ContentCategory.NEWS,
    "technical": ContentCategory.TECHNICAL,
    "technical doc": ContentCategory.TECHNICAL,
    "technical document": ContentCategory.TECHNICAL,
    "documentation": ContentCategory.TECHNICAL,
    "tutorial": ContentCategory.TECHNICAL,
    "other": ContentCategory.OTHER,
}

PAGE_CONTENT_TYPES: dict[ContentCategory, str] = {
    ContentCategory.BLOG: "blog",
    ContentCategory.NEWS: "news",
    ContentCategory.TECHNICAL: "article",
    ContentCategory.JOB: "resource",
    ContentCategory.SCHOLARSHIP: "resource",
    ContentCategory.OTHER: "other",
}

SOURCE_FIELD_CATEGORIES = frozenset(
    {ContentCategory.BLOG, ContentCategory.NEWS, ContentCategory.TECHNICAL, ContentCategory.OTHER}
)


def _alias(value: Any) -> Optional[ContentCategory]:
    if not isinstance(value, str):
        return None
    key = value.strip().lower().replace("-", " ")
    return CATEGORY_ALIASES.get(key) or CATEGORY_ALIASES.get(key.replace(" ", "_"))


def resolve_category(result: dict[str, Any]) -> ContentCategory:
    """
    Map the model's label to a category.

    "category" is consulted before "type"; unknown labels fall back to OTHER.
    """
    for key in ("category", "type"):
        category = _alias(result.get(key))
        if category is not None:
            return category
    return ContentCategory.OTHER


def extract_payload(result: dict[str, Any]) -> dict[str, Any]:
    """The category fields: "data", else "details", else the remaining keys."""
    for key in ("data", "details"):
        value = result.get(key)
        if isinstance(value, dict):
            return dict(value)
    return {k: v for k, v in result.items() if k not in {"type", "category"}}


def split_extra_fields(
    category: ContentCategory, payload: dict[str, Any]
) -> dict[str, Any]:
    """
    Move keys the schema does not know into extra_data, if the schema has it.
    """
    model = CATEGORY_MODELS[category]
    fields = model.model_fields
    if "extra_data" not in fields:
        return payload

    known = {k: v for k, v in payload.items() if k in fields}
    extra = {k: v for k, v in payload.items() if k not in fields}
    if extra:
        known["extra_data"] = {**extra, **(known.get("extra_data") or {})}
    return known


class IngestionService:
    """
    Attributes:
        analyzer: LLM feature service.
        services: Entity service per category.
        pages: Page content service, for page analysis.
        cache: Optional analysis cache; None disables caching.
    """

    def __init__(
        self,
        analyzer: ContentAnalyzer,
        services: dict[ContentCategory, EntityService],
        pages: PageContentService,
        cache: Optional[AnalysisCache] = None,
    ) -> None:
        self.analyzer = analyzer
        self.services = services
        self.pages = pages
        self.cache = cache

    async def classify(self, text: str) -> dict[str, Any]:
        """Classify text, serving repeated texts from the cache."""
        model = self.analyzer.settings.analysis_model

        if self.cache is not None:
            try:
                cached = await self.cache.get(model, text)
            except CacheError as e:
                logger.warning("analysis cache read failed", error=str(e))
                cached = None
            if cached is not None:
                logger.debug("analysis cache hit", model=model)
                return cached

        result = await self.analyzer.analyze_content(text)

        if self.cache is not None:
            try:
                await self.cache.set(model, text, result)
            except CacheError as e:
                logger.warning("analysis cache write failed", error=str(e))

        return result

    async def ingest(self, text: str, source: Optional[str] = None) -> IngestionResult:
        """
        Classify text and store the record in its category's collection.

        Raises:
            AIResponseError: The model answer held no JSON object.
            ProviderError: The LLM call failed.
            pydantic.ValidationError: The extracted fields do not satisfy the schema.
        """
        result = await self.classify(text)
        category = resolve_category(result)
        payload = split_extra_fields(category, extract_payload(result))

        if source and category in SOURCE_FIELD_CATEGORIES and not payload.get("source"):
            payload["source"] = source

        record = await self.services[category].create(payload)
        logger.info("content ingested", category=category.value, record_id=record["id"])
        return IngestionResult(category=category.value, record=record)

    async def analyze_page_content(self, page_id: str) -> IngestionResult:
        """Ingest a stored page and write the outcome back onto it."""
        page = await self.pages.get_by_id(page_id)
        outcome = await self.ingest(page["text"], source=page.get("url"))
        category = ContentCategory(outcome.category)

        await self.pages.record_analysis(
            page_id,
            {
                "category": outcome.category,
                "record_id": outcome.record["id"],
                "analyzed_at": datetime.now(timezone.utc),
            },
            content_type=PAGE_CONTENT_TYPES[category],
        )
        return outcome

    async def analyze_page_content_in_background(self, page_id: str) -> None:
        """
        Background-task entry point.

        Failures are logged and recorded on the page instead of raised,
        since there is no request left to report them to.
        """
        try:
            await self.analyze_page_content(page_id)
        except (ContentIngestException, ValueError) as e:
            message = getattr(e, "message", str(e))
            logger.error("background analysis failed", page_id=page_id, error=message)
            try:
                await self.pages.record_analysis(page_id, {"error": message})
            except ContentIngestException as record_error:
                logger.error(
                    "recording analysis failure failed",
                    page_id=page_id,
                    error=record_error.message,
                )
