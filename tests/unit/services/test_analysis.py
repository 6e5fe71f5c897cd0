"""
Tests for ContentAnalyzer - the LLM-backed operations.

FakeProvider records every request, so the tests assert on the model and
prompt chosen for each operation.
"""

import json

import pytest

from content_ingest.core.exceptions import AIResponseError
from content_ingest.providers.fake import FakeProvider
from content_ingest.services import prompts
from content_ingest.services.analysis import SUMMARY_PARSE_MESSAGE, ContentAnalyzer


@pytest.fixture
def provider():
    return FakeProvider(default_response=None)


@pytest.fixture
def analyzer(provider, test_settings):
    return ContentAnalyzer(provider, test_settings)


class TestAnalyzeContent:
    @pytest.mark.asyncio
    async def test_parses_fenced_answer(self, analyzer, provider):
        provider.queue('```json\n{"type": "blog", "data": {"title": "Hi"}}\n```')

        result = await analyzer.analyze_content("some page text")

        assert result == {"type": "blog", "data": {"title": "Hi"}}

    @pytest.mark.asyncio
    async def test_uses_classification_prompt_and_model(self, analyzer, provider):
        provider.queue('{"type": "other"}')

        await analyzer.analyze_content("some page text")

        request = provider.requests[0]
        assert request.model == "gpt-4o"
        assert request.system_prompt == prompts.CLASSIFY_PROMPT
        assert request.content == "some page text"
        assert request.temperature == 0.3
        assert request.top_p == 1.0

    @pytest.mark.asyncio
    async def test_empty_answer(self, analyzer, provider):
        provider.queue(None)

        with pytest.raises(AIResponseError, match="No response from AI service"):
            await analyzer.analyze_content("text")


class TestSummarizeContent:
    @pytest.mark.asyncio
    async def test_structured_summary(self, analyzer, provider):
        provider.queue(
            json.dumps({"summary": "Short.", "key_points": ["a", "b"], "word_count": 120})
        )

        result = await analyzer.summarize_content("long text")

        assert result == {"summary": "Short.", "key_points": ["a", "b"], "word_count": 120}
        assert provider.requests[0].system_prompt == prompts.SUMMARIZE_PROMPT

    @pytest.mark.asyncio
    async def test_fenced_summary_is_rejected(self, analyzer, provider):
        provider.queue('```json\n{"summary": "Short."}\n```')

        with pytest.raises(AIResponseError) as exc_info:
            await analyzer.summarize_content("long text")
        assert exc_info.value.message == SUMMARY_PARSE_MESSAGE

    @pytest.mark.asyncio
    async def test_summary_without_summary_key_is_rejected(self, analyzer, provider):
        provider.queue('{"key_points": []}')

        with pytest.raises(AIResponseError):
            await analyzer.summarize_content("long text")


class TestTextOperations:
    @pytest.mark.asyncio
    async def test_get_summary_uses_summary_model(self, analyzer, provider):
        provider.queue("<p>Summary</p>")

        assert await analyzer.get_summary("page") == "<p>Summary</p>"
        assert provider.requests[0].model == "gpt-4o-mini"
        assert provider.requests[0].system_prompt == prompts.SUMMARY_HTML_PROMPT

    @pytest.mark.asyncio
    async def test_detail_overview_uses_overview_model(self, analyzer, provider):
        provider.queue("<div>Overview</div>")

        assert await analyzer.detail_overview("page") == "<div>Overview</div>"
        assert provider.requests[0].model == "gpt-4o-mini-2024-07-18"

    @pytest.mark.asyncio
    async def test_extract_meaningful_text(self, analyzer, provider):
        provider.queue("Plain text")

        assert await analyzer.extract_meaningful_text("<html>...</html>") == "Plain text"
        assert provider.requests[0].system_prompt == prompts.HTML_TO_TEXT_PROMPT

    @pytest.mark.asyncio
    async def test_empty_text_answer(self, analyzer, provider):
        provider.queue("  ")

        with pytest.raises(AIResponseError):
            await analyzer.get_summary("page")

    @pytest.mark.asyncio
    async def test_analyze_job(self, analyzer, provider):
        provider.queue('Result: {"job_position": "Engineer"}')

        assert await analyzer.analyze_job("posting") == {"job_position": "Engineer"}
        assert provider.requests[0].system_prompt == prompts.JOB_ANALYSIS_PROMPT

    @pytest.mark.asyncio
    async def test_option_labels_the_user_message(self, analyzer, provider):
        provider.queue("<div>Overview</div>")

        await analyzer.detail_overview("page", option="Audience")

        assert provider.requests[0].option == "Audience"
        assert provider.requests[0].to_messages()[1]["content"] == "Audience: page"


class TestCompletionRequest:
    def test_option_prefixes_user_message(self):
        from content_ingest.providers.base import CompletionRequest

        request = CompletionRequest(
            model="gpt-4o", system_prompt="sys", content="body", option="Translate"
        )

        assert request.to_messages() == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "Translate: body"},
        ]
