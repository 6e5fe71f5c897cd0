"""
Tests for OpenAIProvider - completion, retries and error classification.

The SDK client is replaced with a MagicMock; no network calls are made.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from content_ingest.core.exceptions import (
    ProviderAuthenticationError,
    ProviderError,
    RateLimitError,
)
from content_ingest.providers.base import CompletionRequest, LLMProvider
from content_ingest.providers.openai import OpenAIProvider


def make_response(content):
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@pytest.fixture
def provider():
    provider = OpenAIProvider(api_key="test-key", max_retries=3, retry_delay=0.0)
    provider._client = MagicMock()
    provider._client.chat.completions.create = AsyncMock()
    provider._client.close = AsyncMock()
    return provider


@pytest.fixture
def request_():
    return CompletionRequest(
        model="gpt-4o", system_prompt="Classify.", content="page text", temperature=0.3
    )


class TestOpenAIProviderClass:
    def test_inherits_from_llm_provider(self):
        assert issubclass(OpenAIProvider, LLMProvider)

    def test_accepts_base_url(self):
        provider = OpenAIProvider(api_key="test-key", base_url="https://proxy.example.com/v1")
        assert str(provider._client.base_url).startswith("https://proxy.example.com")


class TestComplete:
    @pytest.mark.asyncio
    async def test_returns_first_choice(self, provider, request_):
        provider._client.chat.completions.create.return_value = make_response('{"type": "blog"}')

        assert await provider.complete(request_) == '{"type": "blog"}'

    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self, provider, request_):
        provider._client.chat.completions.create.return_value = make_response("ok")

        await provider.complete(request_)

        kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["temperature"] == 0.3
        assert kwargs["top_p"] == 1.0
        assert kwargs["messages"] == [
            {"role": "system", "content": "Classify."},
            {"role": "user", "content": "page text"},
        ]

    @pytest.mark.asyncio
    async def test_no_choices(self, provider, request_):
        response = MagicMock()
        response.choices = []
        provider._client.chat.completions.create.return_value = response

        assert await provider.complete(request_) is None


class TestRetry:
    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, provider, request_):
        provider._client.chat.completions.create.side_effect = [
            Exception("Connection reset"),
            make_response("recovered"),
        ]

        assert await provider.complete(request_) == "recovered"
        assert provider._client.chat.completions.create.await_count == 2

    @pytest.mark.asyncio
    async def test_auth_errors_are_not_retried(self, provider, request_):
        provider._client.chat.completions.create.side_effect = Exception(
            "Error code: 401 - Incorrect API key provided"
        )

        with pytest.raises(ProviderAuthenticationError):
            await provider.complete(request_)
        assert provider._client.chat.completions.create.await_count == 1

    @pytest.mark.asyncio
    async def test_rate_limit_exhaustion(self, provider, request_):
        provider._client.chat.completions.create.side_effect = Exception(
            "Error code: 429 - Rate limit reached"
        )

        with pytest.raises(RateLimitError):
            await provider.complete(request_)
        assert provider._client.chat.completions.create.await_count == 3

    @pytest.mark.asyncio
    async def test_other_errors_exhausted(self, provider, request_):
        provider._client.chat.completions.create.side_effect = Exception("server exploded")

        with pytest.raises(ProviderError) as exc_info:
            await provider.complete(request_)
        assert exc_info.value.message == "AI service is currently unavailable."
        assert exc_info.value.cause == "server exploded"

    @pytest.mark.asyncio
    async def test_backoff_doubles(self, request_):
        provider = OpenAIProvider(api_key="k", max_retries=3, retry_delay=0.5)
        provider._client = MagicMock()
        provider._client.chat.completions.create = AsyncMock(side_effect=Exception("boom"))

        with patch("content_ingest.providers.openai.asyncio.sleep", new=AsyncMock()) as sleep:
            with pytest.raises(ProviderError):
                await provider.complete(request_)

        assert [c.args[0] for c in sleep.await_args_list] == [0.5, 1.0]


class TestClose:
    @pytest.mark.asyncio
    async def test_close_closes_client(self, provider):
        await provider.close()
        provider._client.close.assert_awaited_once()
