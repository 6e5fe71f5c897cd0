"""
Services Package - business logic between the routers and the repositories.

- analysis: LLM-backed operations (classification, summaries, overviews)
- ingestion: classify text and store it in its category's collection
- content: CRUD and filters for the category collections
- pages, users, files: page content, accounts and uploads
- cache: Redis cache for classification results
"""

from content_ingest.services.analysis import ContentAnalyzer
from content_ingest.services.cache import AnalysisCache, CacheError
from content_ingest.services.content import (
    AdmissionService,
    BlogService,
    EntityService,
    JobDescriptionService,
    NewsService,
    OtherService,
    ScholarshipService,
    TechnicalService,
)
from content_ingest.services.files import FileService
from content_ingest.services.ingestion import IngestionService
from content_ingest.services.json_extraction import extract_json
from content_ingest.services.pages import PageContentService
from content_ingest.services.storage import LocalFileStorage
from content_ingest.services.users import UserService

__all__ = [
    "AdmissionService",
    "AnalysisCache",
    "BlogService",
    "CacheError",
    "ContentAnalyzer",
    "EntityService",
    "FileService",
    "IngestionService",
    "JobDescriptionService",
    "LocalFileStorage",
    "NewsService",
    "OtherService",
    "PageContentService",
    "ScholarshipService",
    "TechnicalService",
    "UserService",
    "extract_json",
]
