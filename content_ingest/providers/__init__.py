"""
Providers Package - LLM Provider Adapters

The abstract provider interface plus the OpenAI adapter and a fake used in
tests and keyless local development.
"""

from content_ingest.providers.base import CompletionRequest, LLMProvider
from content_ingest.providers.fake import FakeProvider
from content_ingest.providers.openai import OpenAIProvider

__all__ = [
    "CompletionRequest",
    "FakeProvider",
    "LLMProvider",
    "OpenAIProvider",
]
