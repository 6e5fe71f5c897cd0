"""
OpenAI Provider

Implements the LLMProvider port on top of the OpenAI async SDK.

Design Patterns:
- Ports and Adapters: OpenAIProvider implements LLMProvider interface
- Retry with Exponential Backoff: For rate limit and transient errors
"""

import asyncio
from typing import Any, Optional

from openai import AsyncOpenAI

from content_ingest.core.exceptions import (
    ProviderAuthenticationError,
    ProviderError,
    RateLimitError,
)
from content_ingest.observability.logging import get_logger
from content_ingest.providers.base import CompletionRequest, LLMProvider

logger = get_logger(__name__)


class OpenAIProvider(LLMProvider):
    """
    OpenAI GPT provider adapter.

    Args:
        api_key: OpenAI API key.
        base_url: Optional custom endpoint URL (for Azure OpenAI or proxies).
        max_retries: Maximum attempts for transient errors.
        retry_delay: Initial delay between retries (exponential backoff).

    Example:
        >>> provider = OpenAIProvider(api_key="sk-...")
        >>> text = await provider.complete(
        ...     CompletionRequest(model="gpt-4o", system_prompt="...", content="...")
        ... )
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        max_retries: int = 3,
        retry_delay: float = 1.0,
    ) -> None:
        self._max_retries = max_retries
        self._retry_delay = retry_delay

        client_kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if base_url:
            client_kwargs["base_url"] = base_url
        self._client = AsyncOpenAI(**client_kwargs)

    async def complete(self, request: CompletionRequest) -> Optional[str]:
        """
        Run a chat completion and return the first choice's content.

        Raises:
            ProviderAuthenticationError: Immediately on auth errors.
            RateLimitError: When retries are exhausted on rate limiting.
            ProviderError: On other errors after retry exhaustion.
        """
        response = await self._execute_with_retry(
            self._client.chat.completions.create,
            model=request.model,
            messages=request.to_messages(),
            temperature=request.temperature,
            top_p=request.top_p,
        )

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def close(self) -> None:
        await self._client.close()

    # =========================================================================
    # Retry Logic with Exponential Backoff
    # =========================================================================

    async def _execute_with_retry(self, func, **kwargs) -> Any:
        last_error: Exception | None = None

        for attempt in range(self._max_retries):
            try:
                return await func(**kwargs)
            except Exception as e:
                error_type = self._classify_error(str(e))

                if error_type == "auth":
                    raise ProviderAuthenticationError(str(e), provider=self.name) from e

                if error_type == "rate_limit":
                    last_error = RateLimitError(str(e), provider=self.name)
                else:
                    last_error = ProviderError(str(e), provider=self.name)

                logger.warning(
                    "completion attempt failed",
                    model=kwargs.get("model"),
                    attempt=attempt + 1,
                    max_attempts=self._max_retries,
                    error_type=error_type,
                    error=str(e),
                )

                if attempt < self._max_retries - 1:
                    delay = self._retry_delay * (2**attempt)
                    await asyncio.sleep(delay)

        if isinstance(last_error, RateLimitError):
            raise last_error
        raise ProviderError(
            "AI service is currently unavailable.",
            provider=self.name,
            cause=str(last_error),
        )

    def _classify_error(self, error_str: str) -> str:
        """
        Classify an error string into 'auth', 'rate_limit' or 'other'.
        """
        error_lower = error_str.lower()

        if (
            "authentication" in error_lower
            or "api key" in error_lower
            or "unauthorized" in error_lower
            or "401" in error_lower
        ):
            return "auth"

        if "rate limit" in error_lower or "429" in error_lower:
            return "rate_limit"

        return "other"
