"""
Content Analyzer - AI feature service.

Every AI operation is a single system-plus-user completion. Operations that
expect JSON parse the answer (with the extraction fallback chain where the
model is known to wrap its output); the HTML and text operations return the
answer as-is.
"""

import json
from typing import Any, Optional

from content_ingest.core.config import Settings
from content_ingest.core.exceptions import AIResponseError
from content_ingest.models.responses import StructuredSummary
from content_ingest.observability.logging import get_logger
from content_ingest.providers.base import CompletionRequest, LLMProvider
from content_ingest.services import prompts
from content_ingest.services.json_extraction import extract_json, require_response

logger = get_logger(__name__)

SUMMARY_PARSE_MESSAGE = "Error processing AI service response"


class ContentAnalyzer:
    """
    Service for LLM-backed content operations.

    Attributes:
        provider: LLM provider used for every call.
        settings: Model names and sampling parameters.
    """

    def __init__(self, provider: LLMProvider, settings: Settings) -> None:
        self.provider = provider
        self.settings = settings

    async def _ask(
        self,
        model: str,
        system_prompt: str,
        content: str,
        option: Optional[str] = None,
    ) -> Optional[str]:
        request = CompletionRequest(
            model=model,
            system_prompt=system_prompt,
            content=content,
            option=option,
            temperature=self.settings.llm_temperature,
            top_p=self.settings.llm_top_p,
        )
        logger.debug("llm request", model=model, content_chars=len(content))
        return await self.provider.complete(request)

    # =========================================================================
    # JSON-producing operations
    # =========================================================================

    async def analyze_content(self, text: str) -> dict[str, Any]:
        """
        Classify text and extract its category fields.

        Returns:
            The parsed model answer, normally {"type": ..., "data": {...}}.

        Raises:
            AIResponseError: Empty answer or no JSON object found.
        """
        raw = await self._ask(self.settings.analysis_model, prompts.CLASSIFY_PROMPT, text)
        return extract_json(raw)

    async def analyze_job(self, text: str, option: Optional[str] = None) -> dict[str, Any]:
        """Extract job-posting fields from text."""
        raw = await self._ask(
            self.settings.analysis_model, prompts.JOB_ANALYSIS_PROMPT, text, option
        )
        return extract_json(raw)

    async def summarize_content(
        self, text: str, option: Optional[str] = None
    ) -> dict[str, Any]:
        """
        Produce {summary, key_points, word_count}.

        The answer is parsed strictly: anything but a bare JSON object with a
        summary is an error. ``option`` labels the text, as in
        "{option}: {text}".

        Raises:
            AIResponseError: Empty answer, or an answer that is not valid JSON.
        """
        raw = require_response(
            await self._ask(
                self.settings.analysis_model, prompts.SUMMARIZE_PROMPT, text, option
            )
        )
        try:
            return StructuredSummary.model_validate(json.loads(raw)).model_dump()
        except ValueError as e:
            logger.warning("summary response not parseable", error=str(e))
            raise AIResponseError(SUMMARY_PARSE_MESSAGE, raw_response=raw[:500]) from e

    # =========================================================================
    # Text-producing operations
    # =========================================================================

    async def get_summary(self, text: str) -> str:
        """Short HTML summary (300-500 characters)."""
        raw = await self._ask(self.settings.summary_model, prompts.SUMMARY_HTML_PROMPT, text)
        return require_response(raw)

    async def detail_overview(self, text: str, option: Optional[str] = None) -> str:
        """Detailed HTML overview (800-1000 characters)."""
        raw = await self._ask(
            self.settings.overview_model, prompts.DETAILED_OVERVIEW_PROMPT, text, option
        )
        return require_response(raw)

    async def extract_meaningful_text(self, html: str) -> str:
        """Readable text from raw HTML."""
        raw = await self._ask(
            self.settings.extraction_model, prompts.HTML_TO_TEXT_PROMPT, html
        )
        return require_response(raw)
