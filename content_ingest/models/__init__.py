"""
Models Package - Pydantic schemas.

- common: shared field types (flexible dates, enums)
- content: the six content categories and admissions
- pages, users: page content and user accounts
- requests, responses: API envelopes
"""

from content_ingest.models.content import (
    CATEGORY_MODELS,
    Admission,
    Blog,
    ContentCategory,
    JobDescription,
    News,
    Other,
    Scholarship,
    Technical,
)
from content_ingest.models.pages import PageContent, PageContentUpdate
from content_ingest.models.requests import ContentRequest, ListQuery, UrlRequest
from content_ingest.models.responses import (
    ErrorResponse,
    IngestionResult,
    PaginatedResponse,
    StructuredSummary,
)
from content_ingest.models.users import LoginRequest, UserCreate, UserUpdate

__all__ = [
    "CATEGORY_MODELS",
    "Admission",
    "Blog",
    "ContentCategory",
    "ContentRequest",
    "ErrorResponse",
    "IngestionResult",
    "JobDescription",
    "ListQuery",
    "LoginRequest",
    "News",
    "Other",
    "PageContent",
    "PageContentUpdate",
    "PaginatedResponse",
    "Scholarship",
    "StructuredSummary",
    "Technical",
    "UrlRequest",
    "UserCreate",
    "UserUpdate",
]
