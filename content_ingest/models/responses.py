"""Response envelopes."""

import math
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Uniform error envelope."""

    success: bool = False
    message: str


class PaginatedResponse(BaseModel):
    """
    One page of a list query.

    Attributes:
        results: Records on this page.
        page: 1-based page number.
        limit: Page size requested.
        total_pages: ceil(total_results / limit).
        total_results: Records matching the filter across all pages.
    """

    results: list[dict[str, Any]] = Field(default_factory=list)
    page: int
    limit: int
    total_pages: int
    total_results: int

    @classmethod
    def build(
        cls, results: list[dict[str, Any]], page: int, limit: int, total: int
    ) -> "PaginatedResponse":
        return cls(
            results=results,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit) if limit else 0,
            total_results=total,
        )


class IngestionResult(BaseModel):
    """What classification produced and where it was stored."""

    category: str
    record: dict[str, Any]


class StructuredSummary(BaseModel):
    summary: str
    key_points: list[str] = Field(default_factory=list)
    word_count: Any = None
