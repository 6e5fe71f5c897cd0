"""
Shared field types for entity schemas.

Dates coming from the LLM or from scraped pages are rarely ISO 8601, so
``FlexibleDatetime`` also accepts the handful of human formats that show up
in job postings and scholarship pages ("March 1, 2025", "01/03/2025").
"""

from datetime import date, datetime, time, timezone
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

HUMAN_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%Y-%m-%d %H:%M:%S",
)


def parse_datetime(value: Any) -> Any:
    """
    Coerce dates and date-like strings to timezone-aware datetimes.

    Naive values are taken as UTC. Non-string values other than date and
    datetime are passed through for pydantic to judge.

    Raises:
        ValueError: If a string matches none of the accepted formats.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if not isinstance(value, str):
        return value

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
        for fmt in HUMAN_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        raise ValueError(f"Invalid date: {value}")
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


FlexibleDatetime = Annotated[datetime, BeforeValidator(parse_datetime)]
NonEmptyStrList = Annotated[list[str], Field(min_length=1)]
RequiredStr = Annotated[str, Field(min_length=1)]
ReadabilityScore = Annotated[float, Field(ge=0, le=100)]

Sentiment = Literal["positive", "negative", "neutral"]
Complexity = Literal["basic", "intermediate", "advanced"]
ComplexityLevel = Literal["beginner", "intermediate", "advanced"]

COMPLEXITY_VALUES: tuple[str, ...] = ("basic", "intermediate", "advanced")
COMPLEXITY_LEVEL_VALUES: tuple[str, ...] = ("beginner", "intermediate", "advanced")


class EntityModel(BaseModel):
    """
    Base for stored entities.

    Unknown keys are dropped, which matters for LLM output that often carries
    more keys than the schema knows.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)
