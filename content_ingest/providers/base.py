"""
Provider Base Interface

Defines the abstract base class for LLM provider adapters and the request
they accept.

Design Pattern:
- Ports and Adapters (Hexagonal Architecture)
- LLMProvider serves as the "port"
- OpenAIProvider and FakeProvider serve as "adapters"
"""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field


class CompletionRequest(BaseModel):
    """
    A single system-plus-user completion.

    Attributes:
        model: Model identifier (e.g. "gpt-4o").
        system_prompt: Instructions sent as the system message.
        content: The text being processed.
        option: Optional label prefixed to the user message as "{option}: ".
        temperature: Sampling temperature.
        top_p: Nucleus sampling parameter.
    """

    model: str
    system_prompt: str
    content: str
    option: Optional[str] = None
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)

    def user_message(self) -> str:
        if self.option:
            return f"{self.option}: {self.content}"
        return self.content

    def to_messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_message()},
        ]


class LLMProvider(ABC):
    """
    Abstract base class for LLM provider adapters.

    Methods:
        complete: Run one completion and return the assistant text
        close: Release network resources
    """

    name: str = "provider"

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> Optional[str]:
        """
        Run a completion.

        Args:
            request: The completion request.

        Returns:
            The assistant message content, or None if the model returned none.

        Raises:
            ProviderError: On API failures after retries are exhausted.
        """

    async def close(self) -> None:
        """Release network resources. No-op by default."""
        return None
