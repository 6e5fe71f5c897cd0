"""
API Dependencies

FastAPI dependency functions for the API layer. Shared clients (Mongo, Redis,
the LLM provider, the page reader) are created in the application lifespan
and kept on ``app.state``; services are cheap wrappers around them and are
built per request.

Every function here can be replaced in tests through
``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from content_ingest.clients.reader import PageReader
from content_ingest.core.config import Settings, get_settings as _get_settings
from content_ingest.db.mongo import Collections
from content_ingest.db.repository import MongoRepository
from content_ingest.models.content import ContentCategory
from content_ingest.providers.base import LLMProvider
from content_ingest.services.analysis import ContentAnalyzer
from content_ingest.services.cache import AnalysisCache
from content_ingest.services.content import (
    AdmissionService,
    BlogService,
    JobDescriptionService,
    NewsService,
    OtherService,
    ScholarshipService,
    TechnicalService,
)
from content_ingest.services.files import FileService
from content_ingest.services.ingestion import IngestionService
from content_ingest.services.pages import PageContentService
from content_ingest.services.storage import LocalFileStorage
from content_ingest.services.users import UserService

# =============================================================================
# Shared resources
# =============================================================================


def get_settings() -> Settings:
    """Application settings (cached singleton from core.config)."""
    return _get_settings()


def get_database(request: Request) -> AsyncDatabase:
    return request.app.state.mongo.database


def get_llm_provider(request: Request) -> LLMProvider:
    return request.app.state.provider


def get_analysis_cache(request: Request) -> Optional[AnalysisCache]:
    """The analysis cache, or None when caching is disabled."""
    return getattr(request.app.state, "analysis_cache", None)


def get_page_reader(request: Request) -> PageReader:
    return request.app.state.reader


def get_analyzer(
    provider: LLMProvider = Depends(get_llm_provider),
    settings: Settings = Depends(get_settings),
) -> ContentAnalyzer:
    return ContentAnalyzer(provider, settings)


# =============================================================================
# Entity services
# =============================================================================


def _repository(database: AsyncDatabase, name: str) -> MongoRepository:
    return MongoRepository(database[name])


def get_job_service(database: AsyncDatabase = Depends(get_database)) -> JobDescriptionService:
    return JobDescriptionService(_repository(database, Collections.JOB_DESCRIPTIONS))


def get_scholarship_service(
    database: AsyncDatabase = Depends(get_database),
) -> ScholarshipService:
    return ScholarshipService(_repository(database, Collections.SCHOLARSHIPS))


def get_blog_service(database: AsyncDatabase = Depends(get_database)) -> BlogService:
    return BlogService(_repository(database, Collections.BLOGS))


def get_news_service(database: AsyncDatabase = Depends(get_database)) -> NewsService:
    return NewsService(_repository(database, Collections.NEWS))


def get_technical_service(
    database: AsyncDatabase = Depends(get_database),
) -> TechnicalService:
    return TechnicalService(_repository(database, Collections.TECHNICAL))


def get_other_service(database: AsyncDatabase = Depends(get_database)) -> OtherService:
    return OtherService(_repository(database, Collections.OTHERS))


def get_admission_service(
    database: AsyncDatabase = Depends(get_database),
) -> AdmissionService:
    return AdmissionService(_repository(database, Collections.ADMISSIONS))


def get_page_content_service(
    database: AsyncDatabase = Depends(get_database),
) -> PageContentService:
    return PageContentService(_repository(database, Collections.PAGE_CONTENTS))


def get_user_service(database: AsyncDatabase = Depends(get_database)) -> UserService:
    return UserService(_repository(database, Collections.USERS))


def get_file_service(
    database: AsyncDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> FileService:
    return FileService(
        _repository(database, Collections.FILES),
        LocalFileStorage(settings.upload_dir),
        settings.max_upload_bytes,
    )


def get_ingestion_service(
    analyzer: ContentAnalyzer = Depends(get_analyzer),
    cache: Optional[AnalysisCache] = Depends(get_analysis_cache),
    pages: PageContentService = Depends(get_page_content_service),
    jobs: JobDescriptionService = Depends(get_job_service),
    scholarships: ScholarshipService = Depends(get_scholarship_service),
    blogs: BlogService = Depends(get_blog_service),
    news: NewsService = Depends(get_news_service),
    technical: TechnicalService = Depends(get_technical_service),
    others: OtherService = Depends(get_other_service),
) -> IngestionService:
    services = {
        ContentCategory.JOB: jobs,
        ContentCategory.SCHOLARSHIP: scholarships,
        ContentCategory.BLOG: blogs,
        ContentCategory.NEWS: news,
        ContentCategory.TECHNICAL: technical,
        ContentCategory.OTHER: others,
    }
    return IngestionService(analyzer, services, pages, cache=cache)


__all__ = [
    "get_settings",
    "get_database",
    "get_llm_provider",
    "get_analysis_cache",
    "get_page_reader",
    "get_analyzer",
    "get_job_service",
    "get_scholarship_service",
    "get_blog_service",
    "get_news_service",
    "get_technical_service",
    "get_other_service",
    "get_admission_service",
    "get_page_content_service",
    "get_user_service",
    "get_file_service",
    "get_ingestion_service",
]
