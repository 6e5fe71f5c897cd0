"""Page content schemas: scraped pages waiting for (or holding) analysis."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from content_ingest.models.common import EntityModel, RequiredStr

PageContentType = Literal["article", "news", "blog", "resource", "other"]


class PageContent(EntityModel):
    """
    A captured web page.

    Attributes:
        url: Full page URL, unique across the collection.
        baseurl: scheme://host, derived from url when omitted.
        text: Visible text, used as classifier input.
        html: Raw markup as captured.
    """

    title: str = ""
    text: RequiredStr
    url: RequiredStr
    baseurl: Optional[str] = None
    html: str = ""
    media: list[str] = Field(default_factory=list)
    content_type: PageContentType = "other"
    metadata: dict[str, Any] = Field(default_factory=dict)


class PageContentUpdate(BaseModel):
    """Partial update for PUT /{url}; absent fields are left untouched."""

    title: Optional[str] = None
    text: Optional[str] = None
    baseurl: Optional[str] = None
    html: Optional[str] = None
    media: Optional[list[str]] = None
    content_type: Optional[PageContentType] = None
    metadata: Optional[dict[str, Any]] = None
