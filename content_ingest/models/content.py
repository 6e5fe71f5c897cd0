"""
Content category schemas.

One schema per collection. The same schema validates POST bodies, merged
PATCH documents and records produced by LLM classification.
"""

import re
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import Field, field_validator

from content_ingest.models.common import (
    Complexity,
    ComplexityLevel,
    EntityModel,
    FlexibleDatetime,
    NonEmptyStrList,
    ReadabilityScore,
    RequiredStr,
    Sentiment,
)


class ContentCategory(str, Enum):
    """Categories the classifier can assign to a page."""

    JOB = "job"
    SCHOLARSHIP = "scholarship"
    BLOG = "blog"
    NEWS = "news"
    TECHNICAL = "technical"
    OTHER = "other"


# =============================================================================
# Job Description
# =============================================================================


def normalize_job_type(value: Any) -> Any:
    """'Full-Time' and 'full_time' both become 'full time'."""
    if isinstance(value, str):
        return re.sub(r"[\s_-]+", " ", value.strip().lower())
    return value


class JobDescription(EntityModel):
    company_title: RequiredStr
    job_position: RequiredStr
    job_location: RequiredStr
    job_type: Literal["contract", "full time", "part time"]
    workplace: Literal["remote", "on-site", "hybrid"]
    due_date: Optional[FlexibleDatetime] = None
    tech_stack: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    professional_experience: Optional[int] = Field(default=None, ge=0)
    requirements: list[str] = Field(default_factory=list)
    additional_skills: list[str] = Field(default_factory=list)
    company_culture: Optional[str] = None
    status: Literal["active", "closed", "expired"] = "active"

    @field_validator("job_type", mode="before")
    @classmethod
    def _normalize_job_type(cls, v: Any) -> Any:
        return normalize_job_type(v)

    @field_validator("workplace", mode="before")
    @classmethod
    def normalize_workplace(cls, v: Any) -> Any:
        if isinstance(v, str):
            value = v.strip().lower()
            if value in {"onsite", "on site", "on_site", "office"}:
                return "on-site"
            return value
        return v

    @field_validator("professional_experience", mode="before")
    @classmethod
    def parse_experience(cls, v: Any) -> Any:
        """Take the first integer from strings such as '3+ years'."""
        if isinstance(v, str):
            match = re.search(r"\d+", v)
            if match is None:
                raise ValueError("Invalid professional experience format")
            return int(match.group())
        if isinstance(v, float):
            return int(v)
        return v


# =============================================================================
# Scholarship
# =============================================================================


class Scholarship(EntityModel):
    title: RequiredStr
    organization: RequiredStr
    amount: RequiredStr
    deadline: FlexibleDatetime
    eligibility: NonEmptyStrList
    requirements: NonEmptyStrList
    field_of_study: NonEmptyStrList
    degree_level: NonEmptyStrList
    country: RequiredStr
    link: RequiredStr
    status: Literal["active", "expired", "upcoming"] = "active"
    additional_info: dict[str, Any] = Field(default_factory=dict)

    @field_validator("amount", mode="before")
    @classmethod
    def stringify_amount(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


# =============================================================================
# Blog / News
# =============================================================================


class Blog(EntityModel):
    title: RequiredStr
    author: RequiredStr
    publication_date: FlexibleDatetime
    source: RequiredStr
    summary: RequiredStr
    key_points: NonEmptyStrList
    topics_covered: NonEmptyStrList
    target_audience: RequiredStr
    tags: list[str] = Field(default_factory=list)
    sentiment: Sentiment
    complexity: Complexity
    readability_score: ReadabilityScore
    additional_info: dict[str, Any] = Field(default_factory=dict)
    extra_data: dict[str, Any] = Field(default_factory=dict)


class News(Blog):
    category: RequiredStr
    is_breaking: bool = False
    region: Optional[str] = None


# =============================================================================
# Technical Document
# =============================================================================


class Technical(EntityModel):
    title: RequiredStr
    author: RequiredStr
    publication_date: FlexibleDatetime
    source: RequiredStr
    technology: RequiredStr
    complexity_level: ComplexityLevel
    code_snippets: list[str] = Field(default_factory=list)
    prerequisites: NonEmptyStrList
    target_audience: RequiredStr
    tags: list[str] = Field(default_factory=list)
    sentiment: Sentiment
    content_type: RequiredStr
    readability_score: ReadabilityScore
    additional_info: dict[str, Any] = Field(default_factory=dict)
    extra_data: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Other
# =============================================================================


class Other(EntityModel):
    """Anything the classifier could not place in a specific category."""

    title: RequiredStr
    content_type: RequiredStr
    author: Optional[str] = None
    publication_date: Optional[FlexibleDatetime] = None
    source: Optional[str] = None
    summary: RequiredStr
    key_points: NonEmptyStrList
    topics_covered: NonEmptyStrList
    target_audience: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    sentiment: Sentiment
    complexity: Complexity
    readability_score: ReadabilityScore
    content_details: dict[str, Any]
    additional_info: dict[str, Any] = Field(default_factory=dict)
    extra_data: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Admission
# =============================================================================


class Admission(EntityModel):
    university: RequiredStr
    program_title: RequiredStr
    degree: RequiredStr
    duration: RequiredStr
    language_of_instruction: Optional[str] = None
    admission_requirements: NonEmptyStrList
    documents_required: NonEmptyStrList
    application_deadline: FlexibleDatetime
    application_url: Optional[str] = None
    tuition_fee: Optional[str] = None
    additional_info: dict[str, Any] = Field(default_factory=dict)


CATEGORY_MODELS: dict[ContentCategory, type[EntityModel]] = {
    ContentCategory.JOB: JobDescription,
    ContentCategory.SCHOLARSHIP: Scholarship,
    ContentCategory.BLOG: Blog,
    ContentCategory.NEWS: News,
    ContentCategory.TECHNICAL: Technical,
    ContentCategory.OTHER: Other,
}
