"""
Page reader client.

Fetches a readable rendering of a remote page through a reader proxy
(r.jina.ai by default): ``GET {base_url}/{page_url}`` returns the page as
plain text or markdown.
"""

import logging

import httpx

from content_ingest.core.exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)


class PageReader:
    """
    Thin wrapper around an httpx client pointed at the reader proxy.

    Attributes:
        base_url: Reader proxy root, without trailing slash.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self.base_url = base_url.rstrip("/")

    def reader_url(self, url: str) -> str:
        return f"{self.base_url}/{url.strip()}"

    async def fetch(self, url: str) -> str:
        """
        Fetch the readable text of ``url``.

        Raises:
            UpstreamFetchError: On transport errors or non-2xx responses.
        """
        target = self.reader_url(url)
        try:
            response = await self._client.get(target)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Reader returned {e.response.status_code} for {url}")
            raise UpstreamFetchError(
                f"Failed to fetch page content: upstream returned {e.response.status_code}",
                url=url,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Reader request failed for {url}: {e}")
            raise UpstreamFetchError(
                "Failed to fetch page content", url=url
            ) from e

        return response.text

    async def close(self) -> None:
        await self._client.aclose()
