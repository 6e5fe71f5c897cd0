"""
Request models shared by the routers.

ListQuery is consumed with ``Depends()`` so its fields become query parameters.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

SORT_FIELD_PATTERN = r"^[A-Za-z_][A-Za-z0-9_.]*$"


class ContentText(BaseModel):
    text: Optional[str] = None


class ContentRequest(BaseModel):
    """
    Body of the text-based feature endpoints: {"content": {"text": "..."}}.

    ``option`` is an optional label sent ahead of the text as "{option}: {text}".
    """

    content: Optional[ContentText] = None
    option: Optional[str] = None

    @property
    def text(self) -> Optional[str]:
        if self.content is None or self.content.text is None:
            return None
        stripped = self.content.text.strip()
        return stripped or None


class UrlRequest(BaseModel):
    url: Optional[str] = None


class ListQuery(BaseModel):
    """
    Pagination and sorting shared by every list endpoint.

    Attributes:
        page: 1-based page number.
        limit: Page size.
        sort_by: Field to sort on.
        sort_order: "asc" or "desc".
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    sort_by: str = Field(default="created_at", pattern=SORT_FIELD_PATTERN)
    sort_order: Literal["asc", "desc"] = "desc"

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def sort(self) -> list[tuple[str, int]]:
        return [(self.sort_by, 1 if self.sort_order == "asc" else -1)]
