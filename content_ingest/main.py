"""
Content Ingest - Main Application Entry Point

FastAPI application that classifies web-page text with an LLM and stores the
result in per-category MongoDB collections.

Run locally:
    uvicorn content_ingest.main:app --port 3000
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

import redis.asyncio as aioredis
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from content_ingest import __version__
from content_ingest.api.errors import register_exception_handlers
from content_ingest.api.middleware.logging import RequestLoggingMiddleware
from content_ingest.api.routes.admissions import router as admissions_router
from content_ingest.api.routes.blogs import router as blogs_router
from content_ingest.api.routes.features import router as features_router
from content_ingest.api.routes.files import router as files_router
from content_ingest.api.routes.health import router as health_router
from content_ingest.api.routes.jobs import router as jobs_router
from content_ingest.api.routes.news import router as news_router
from content_ingest.api.routes.others import router as others_router
from content_ingest.api.routes.page_content import router as page_content_router
from content_ingest.api.routes.scholarships import router as scholarships_router
from content_ingest.api.routes.technical import router as technical_router
from content_ingest.api.routes.users import router as users_router
from content_ingest.clients.http import create_http_client
from content_ingest.clients.reader import PageReader
from content_ingest.core.config import Settings, get_settings
from content_ingest.db.mongo import MongoConnection, ensure_indexes
from content_ingest.observability.logging import configure_logging, get_logger
from content_ingest.providers.base import LLMProvider
from content_ingest.providers.fake import FakeProvider
from content_ingest.providers.openai import OpenAIProvider
from content_ingest.services.cache import AnalysisCache

# Application metadata
APP_NAME = "Content Ingest"
APP_VERSION = __version__
APP_DESCRIPTION = "LLM-backed classification and storage of web content"
API_PREFIX = "/api"

logger = get_logger(__name__)


def build_provider(settings: Settings) -> LLMProvider:
    """
    OpenAI when a key is configured.

    Without a key, development runs against FakeProvider so the API can be
    exercised locally; other environments refuse to start.
    """
    api_key = settings.openai_api_key.get_secret_value()
    if api_key:
        return OpenAIProvider(
            api_key=api_key,
            base_url=settings.openai_base_url,
            max_retries=settings.llm_max_retries,
            retry_delay=settings.llm_retry_delay_seconds,
        )
    if settings.environment != "development":
        raise RuntimeError("CONTENT_INGEST_OPENAI_API_KEY is required outside development")
    logger.warning("no OpenAI API key configured, using the fake provider")
    return FakeProvider()


def build_analysis_cache(settings: Settings) -> Optional[AnalysisCache]:
    if not settings.analysis_cache_enabled:
        return None
    client = aioredis.from_url(settings.redis_url, encoding="utf-8", decode_responses=True)
    return AnalysisCache(client, ttl_seconds=settings.analysis_cache_ttl_seconds)


# =============================================================================
# Lifespan Context Manager
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Create the shared clients on startup and close them on shutdown.

    Index creation failures are logged rather than fatal: the database may
    still be coming up, and /health/ready reports it.
    """
    settings = get_settings()
    configure_logging(settings.log_level, service_name=settings.service_name)
    logger.info(
        "starting",
        app=APP_NAME,
        version=APP_VERSION,
        environment=settings.environment,
    )

    mongo = MongoConnection(
        settings.mongodb_url,
        settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    database = mongo.connect()
    try:
        await ensure_indexes(database)
    except PyMongoError as e:
        logger.warning("index creation failed", error=str(e))

    app.state.mongo = mongo
    app.state.analysis_cache = build_analysis_cache(settings)
    app.state.provider = build_provider(settings)
    app.state.reader = PageReader(
        create_http_client(timeout_seconds=settings.reader_timeout_seconds),
        settings.reader_base_url,
    )

    yield

    logger.info("shutting down", app=APP_NAME)
    await app.state.reader.close()
    await app.state.provider.close()
    if app.state.analysis_cache is not None:
        await app.state.analysis_cache.close()
    await mongo.close()


_settings = get_settings()

app = FastAPI(
    title=APP_NAME,
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    docs_url="/docs" if _settings.environment != "production" else None,
    redoc_url="/redoc" if _settings.environment != "production" else None,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health_router)
for router in (
    jobs_router,
    scholarships_router,
    blogs_router,
    news_router,
    technical_router,
    others_router,
    admissions_router,
    page_content_router,
    users_router,
    files_router,
    features_router,
):
    app.include_router(router, prefix=API_PREFIX)


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/", tags=["Info"])
async def root() -> dict[str, Any]:
    """Root endpoint returning basic service information."""
    return {
        "service": APP_NAME,
        "version": APP_VERSION,
        "docs": "/docs" if _settings.environment != "production" else "disabled",
    }
