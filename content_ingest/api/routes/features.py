"""
Features Router - /api/features

AI operations over submitted text or fetched pages.

- POST /analyze            classify text and store it in its category
- POST /analyze/{page_id}  same, for stored page content
- POST /summarize          structured summary {summary, key_points, word_count}
- POST /summary            HTML summary of a URL, fetched through the reader
- POST /overview           detailed HTML overview
- POST /extract-text       readable text from HTML
- POST /analyze-job        job-posting fields
- POST /extract            raw reader output for a URL
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends

from content_ingest.api.deps import get_analyzer, get_ingestion_service, get_page_reader
from content_ingest.clients.reader import PageReader
from content_ingest.core.exceptions import ContentValidationError
from content_ingest.models.requests import ContentRequest, UrlRequest
from content_ingest.services.analysis import ContentAnalyzer
from content_ingest.services.ingestion import IngestionService

router = APIRouter(prefix="/features", tags=["Features"])

TEXT_REQUIRED_MESSAGE = "Text content is required"
URL_REQUIRED_MESSAGE = "URL is required"


def require_text(request: Optional[ContentRequest]) -> str:
    text = request.text if request is not None else None
    if text is None:
        raise ContentValidationError(TEXT_REQUIRED_MESSAGE, field="content.text")
    return text


def request_option(request: Optional[ContentRequest]) -> Optional[str]:
    option = ((request.option if request is not None else None) or "").strip()
    return option or None


def require_url(request: Optional[UrlRequest]) -> str:
    url = ((request.url if request is not None else None) or "").strip()
    if not url:
        raise ContentValidationError(URL_REQUIRED_MESSAGE, field="url")
    return url


@router.post("/analyze", summary="Classify and store text")
async def analyze(
    request: Optional[ContentRequest] = None,
    ingestion: IngestionService = Depends(get_ingestion_service),
) -> dict[str, Any]:
    result = await ingestion.ingest(require_text(request))
    return {"success": True, "data": result.model_dump()}


@router.post("/analyze/{page_id}", summary="Classify and store saved page content")
async def analyze_page(
    page_id: str,
    ingestion: IngestionService = Depends(get_ingestion_service),
) -> dict[str, Any]:
    result = await ingestion.analyze_page_content(page_id)
    return {"success": True, "data": result.model_dump()}


@router.post("/summarize", summary="Structured summary")
async def summarize(
    request: Optional[ContentRequest] = None,
    analyzer: ContentAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    data = await analyzer.summarize_content(require_text(request), request_option(request))
    return {"success": True, "data": data}


@router.post("/summary", summary="HTML summary of a URL")
async def summary(
    request: Optional[UrlRequest] = None,
    reader: PageReader = Depends(get_page_reader),
    analyzer: ContentAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    page_text = await reader.fetch(require_url(request))
    return {"success": True, "data": await analyzer.get_summary(page_text)}


@router.post("/overview", summary="Detailed HTML overview")
async def overview(
    request: Optional[ContentRequest] = None,
    analyzer: ContentAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    data = await analyzer.detail_overview(require_text(request), request_option(request))
    return {"success": True, "data": data}


@router.post("/extract-text", summary="Readable text from HTML")
async def extract_text(
    request: Optional[ContentRequest] = None,
    analyzer: ContentAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    text = await analyzer.extract_meaningful_text(require_text(request))
    return {"success": True, "data": text}


@router.post("/analyze-job", summary="Extract job-posting fields")
async def analyze_job(
    request: Optional[ContentRequest] = None,
    analyzer: ContentAnalyzer = Depends(get_analyzer),
) -> dict[str, Any]:
    data = await analyzer.analyze_job(require_text(request), request_option(request))
    return {"success": True, "data": data}


@router.post("/extract", summary="Fetch a page through the reader")
async def extract(
    request: Optional[UrlRequest] = None,
    reader: PageReader = Depends(get_page_reader),
) -> dict[str, Any]:
    return {"content": await reader.fetch(require_url(request))}
