"""HTTP client for archiveofourown.org."""

from __future__ import annotations

import httpx

from ao3nav.config import ARCHIVE_BASE_URL, get_config, navigate_url
from ao3nav.errors import FetchFailure

# Default headers to mimic a browser
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


class ArchiveClient:
    """Async HTTP client for fetching archive pages."""

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ArchiveClient":
        timeout = self._timeout if self._timeout is not None else get_config().timeout
        self._client = httpx.AsyncClient(
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
            timeout=timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context manager.")
        return self._client

    @staticmethod
    def _validate_html_response(response: httpx.Response) -> None:
        """Validate that an HTTP response looks like an HTML page.

        Raises:
            FetchFailure: If the content type is missing or isn't HTML.
        """
        content_type = response.headers.get("content-type", "")
        if "html" not in content_type:
            raise FetchFailure(
                f"Unexpected content type: {content_type or 'none'}",
                url=str(response.url),
                status_code=response.status_code,
            )

    async def get_page(self, url: str) -> str:
        """Fetch a page and return its body as text.

        Args:
            url: Absolute URL, or a path relative to the archive
                (e.g., '/works/123/navigate').

        Returns:
            HTML content of the page.

        Raises:
            FetchFailure: On invalid URLs, transport errors, non-success
                statuses, or responses whose content type is missing or
                not HTML.
        """
        if url.startswith("/"):
            url = f"{ARCHIVE_BASE_URL}{url}"

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchFailure(
                f"HTTP {exc.response.status_code} for {url}",
                url=url,
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchFailure(f"Request to {url} failed: {exc}", url=url) from exc

        self._validate_html_response(response)
        return response.text

    async def get_navigate_page(self, work_id: str) -> str:
        """Fetch the chapter navigation page of a work.

        Args:
            work_id: The numeric work identifier.

        Returns:
            HTML content of the page.
        """
        return await self.get_page(navigate_url(work_id))


async def fetch_navigate_page(work_id: str) -> str:
    """Convenience function to fetch a work's navigate page."""
    async with ArchiveClient() as client:
        return await client.get_navigate_page(work_id)
