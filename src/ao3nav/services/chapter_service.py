"""Service for fetching chapter lists and page summaries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable

from ao3nav.config import MAX_CONCURRENT_FETCHES, navigate_url
from ao3nav.errors import FailureKind, FetchFailure, FetchOutcome, ParseFailure
from ao3nav.scraper.client import ArchiveClient
from ao3nav.scraper.document import DocumentAdapter, SoupAdapter
from ao3nav.scraper.navigate_parser import ChapterRecord, NavigatePageParser
from ao3nav.scraper.page_parser import PageParser, PageSummary

logger = logging.getLogger(__name__)


class ChapterService:
    """Fetches archive pages and runs the extractors over them.

    Args:
        client_factory: Callable returning a fresh, unopened ArchiveClient.
        adapter: Document adapter used to parse every fetched page.
    """

    def __init__(
        self,
        client_factory: Callable[[], ArchiveClient] | None = None,
        adapter: DocumentAdapter | None = None,
        max_concurrent: int = MAX_CONCURRENT_FETCHES,
    ) -> None:
        self._client_factory = client_factory or ArchiveClient
        self.adapter = adapter or SoupAdapter()
        self.max_concurrent = max_concurrent

    async def _fetch_chapters_with(self, client: ArchiveClient, work_id: str) -> FetchOutcome:
        work_id = str(work_id)
        url = navigate_url(work_id)
        logger.debug("Fetching chapters from %s", url)

        try:
            html = await client.get_page(url)
        except FetchFailure as exc:
            logger.warning("Fetch failed for work %s: %s", work_id, exc)
            return FetchOutcome.failed(FailureKind.FETCH, str(exc))

        try:
            parser = NavigatePageParser(html, self.adapter)
        except ParseFailure as exc:
            logger.warning("Parse failed for work %s: %s", work_id, exc)
            return FetchOutcome.failed(FailureKind.PARSE, str(exc))

        if not parser.has_chapter_index():
            logger.info("No chapter list found for work %s", work_id)
            return FetchOutcome.success([])

        chapters = parser.parse(work_id)
        logger.info("Found %d chapters for work %s", len(chapters), work_id)
        return FetchOutcome.success(chapters)

    async def fetch_chapters(self, work_id: str) -> FetchOutcome:
        """Fetch the chapter list of a work.

        Fetch and parse failures are reported in the outcome rather than
        raised; an ok outcome with no chapters means the page had no chapter
        index.
        """
        async with self._client_factory() as client:
            return await self._fetch_chapters_with(client, work_id)

    async def fetch_chapters_for_work(self, work_id: str) -> list[ChapterRecord]:
        """Fetch the chapter list of a work, or an empty list on any failure."""
        try:
            outcome = await self.fetch_chapters(work_id)
        except Exception:
            logger.exception("Error fetching chapters for work %s", work_id)
            return []
        return list(outcome.chapters)

    async def fetch_chapters_for_works(self, work_ids: Iterable[str]) -> dict[str, FetchOutcome]:
        """Fetch the chapter lists of several works concurrently.

        At most ``max_concurrent`` requests are in flight at once. Each work
        gets its own outcome; one failing work does not affect the others.
        """
        work_ids = list(dict.fromkeys(str(work_id) for work_id in work_ids))
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async with self._client_factory() as client:

            async def fetch_one(work_id: str) -> FetchOutcome:
                async with semaphore:
                    try:
                        return await self._fetch_chapters_with(client, work_id)
                    except Exception as exc:
                        logger.exception("Error fetching chapters for work %s", work_id)
                        return FetchOutcome.failed(FailureKind.UNEXPECTED, str(exc))

            outcomes = await asyncio.gather(*(fetch_one(work_id) for work_id in work_ids))

        return dict(zip(work_ids, outcomes))

    async def fetch_page_summary(self, url: str) -> PageSummary | None:
        """Fetch a page and summarize it.

        Returns:
            The page summary, or None if fetching or parsing failed.
        """
        try:
            async with self._client_factory() as client:
                html = await client.get_page(url)
            return PageParser(html, self.adapter).parse()
        except Exception:
            logger.exception("Scraping %s failed", url)
            return None


async def fetch_chapters_for_work(work_id: str) -> list[ChapterRecord]:
    """Convenience function to fetch the chapter list of a work."""
    return await ChapterService().fetch_chapters_for_work(work_id)


async def fetch_page_summary(url: str) -> PageSummary | None:
    """Convenience function to fetch and summarize a page."""
    return await ChapterService().fetch_page_summary(url)
