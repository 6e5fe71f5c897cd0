"""
Fake LLM Provider - Test Double Implementation

A FakeProvider implements the real LLMProvider interface without network
calls. It answers from a queue of scripted responses, falling back to a fixed
default, and records every request so tests can assert on models and prompts.

It is also used at startup when no OpenAI key is configured in development,
so the API can be exercised locally end to end.
"""

import json
from collections import deque
from typing import Iterable, Optional

from content_ingest.providers.base import CompletionRequest, LLMProvider

DEFAULT_FAKE_RESPONSE = json.dumps(
    {
        "type": "other",
        "data": {
            "title": "Untitled page",
            "content_type": "page",
            "summary": "Fake classification produced without an LLM.",
            "key_points": ["No model was called"],
            "topics_covered": ["local development"],
            "sentiment": "neutral",
            "complexity": "basic",
            "readability_score": 50,
            "content_details": {"provider": "fake"},
        },
    }
)


class FakeProvider(LLMProvider):
    """
    Fake LLM provider for testing and local development.

    Attributes:
        requests: Every CompletionRequest received, in order.

    Example:
        >>> provider = FakeProvider(responses=['{"type": "blog", "data": {}}'])
        >>> await provider.complete(request)
        '{"type": "blog", "data": {}}'
    """

    name = "fake"

    def __init__(
        self,
        responses: Optional[Iterable[Optional[str]]] = None,
        default_response: Optional[str] = DEFAULT_FAKE_RESPONSE,
        error_on_complete: Optional[Exception] = None,
    ) -> None:
        self._responses: deque[Optional[str]] = deque(responses or [])
        self.default_response = default_response
        self.error_on_complete = error_on_complete
        self.requests: list[CompletionRequest] = []

    def queue(self, *responses: Optional[str]) -> None:
        """Append scripted responses, consumed first-in first-out."""
        self._responses.extend(responses)

    async def complete(self, request: CompletionRequest) -> Optional[str]:
        self.requests.append(request)

        if self.error_on_complete is not None:
            raise self.error_on_complete

        if self._responses:
            return self._responses.popleft()
        return self.default_response
