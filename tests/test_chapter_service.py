"""Tests for the chapter fetch orchestration."""

import asyncio

import httpx
import pytest

from ao3nav.errors import FailureKind, FetchOutcome, ParseFailure
from ao3nav.scraper.document import SoupAdapter
from ao3nav.scraper.navigate_parser import ChapterRecord
from ao3nav.services.chapter_service import ChapterService

from conftest import html_response


class RejectingAdapter(SoupAdapter):
    """Adapter whose parser always fails."""

    def parse(self, html):
        raise ParseFailure("rejected")


class TestFetchChapters:
    """Tests for ChapterService.fetch_chapters and fetch_chapters_for_work."""

    @pytest.mark.asyncio
    async def test_fetch_chapters(self, client_factory, load_fixture):
        html = load_fixture("navigate_page.html")
        service = ChapterService(client_factory(lambda request: html_response(html)))

        outcome = await service.fetch_chapters("5")

        assert outcome.ok
        assert [chapter.id for chapter in outcome.chapters] == ["123", "124", "126"]
        assert all(chapter.work_id == "5" for chapter in outcome.chapters)

    @pytest.mark.asyncio
    async def test_fetch_chapters_for_work(self, client_factory, load_fixture):
        html = load_fixture("navigate_page.html")
        service = ChapterService(client_factory(lambda request: html_response(html)))

        chapters = await service.fetch_chapters_for_work("5")

        assert chapters[0] == ChapterRecord(
            id="123", name="1. Chapter One", work_id="5", date="2024-01-01"
        )

    @pytest.mark.asyncio
    async def test_transport_error_returns_empty(self, client_factory):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = ChapterService(client_factory(handler))

        assert await service.fetch_chapters_for_work("5") == []

        outcome = await service.fetch_chapters("5")
        assert not outcome.ok
        assert outcome.failure is FailureKind.FETCH
        assert outcome.chapters == ()

    @pytest.mark.asyncio
    async def test_error_status_returns_empty(self, client_factory):
        service = ChapterService(client_factory(lambda request: html_response("", 503)))

        assert await service.fetch_chapters_for_work("5") == []
        assert (await service.fetch_chapters("5")).failure is FailureKind.FETCH

    @pytest.mark.asyncio
    async def test_parse_failure(self, client_factory):
        service = ChapterService(
            client_factory(lambda request: html_response("<html></html>")),
            adapter=RejectingAdapter(),
        )

        outcome = await service.fetch_chapters("5")

        assert outcome.failure is FailureKind.PARSE
        assert await service.fetch_chapters_for_work("5") == []

    @pytest.mark.asyncio
    async def test_invalid_work_id_is_fetch_failure(self, client_factory):
        """A work id that cannot form a URL fails the fetch instead of raising."""
        service = ChapterService(client_factory(lambda request: html_response("<html></html>")))

        outcome = await service.fetch_chapters("2\x00")

        assert outcome.failure is FailureKind.FETCH
        assert await service.fetch_chapters_for_work("2\x00") == []

    @pytest.mark.asyncio
    async def test_no_chapter_index_is_success(self, client_factory, load_fixture):
        """A single-chapter work is distinguishable from a failed fetch."""
        html = load_fixture("single_chapter_page.html")
        service = ChapterService(client_factory(lambda request: html_response(html)))

        outcome = await service.fetch_chapters("7")

        assert outcome == FetchOutcome.success([])
        assert outcome.ok

    @pytest.mark.asyncio
    async def test_unexpected_error_is_not_raised(self):
        def broken_factory():
            raise ValueError("boom")

        service = ChapterService(broken_factory)

        assert await service.fetch_chapters_for_work("5") == []
        with pytest.raises(ValueError):
            await service.fetch_chapters("5")


class TestFetchChaptersForWorks:
    """Tests for ChapterService.fetch_chapters_for_works."""

    @pytest.mark.asyncio
    async def test_outcomes_per_work(self, client_factory):
        def handler(request):
            work_id = request.url.path.split("/")[2]
            if work_id == "2":
                return html_response("", 500)
            return html_response(
                '<ol class="chapter index group">'
                f'<li><a href="/works/{work_id}/chapters/{work_id}0">First</a></li></ol>'
            )

        service = ChapterService(client_factory(handler))

        outcomes = await service.fetch_chapters_for_works(["1", "2", "3", "1"])

        assert list(outcomes) == ["1", "2", "3"]
        assert outcomes["1"].chapters[0].id == "10"
        assert outcomes["2"].failure is FailureKind.FETCH
        assert outcomes["3"].chapters[0].work_id == "3"

    @pytest.mark.asyncio
    async def test_invalid_work_id_does_not_affect_others(self, client_factory):
        service = ChapterService(
            client_factory(
                lambda request: html_response(
                    '<ol class="chapter index group">'
                    '<li><a href="/works/1/chapters/10">First</a></li></ol>'
                )
            )
        )

        outcomes = await service.fetch_chapters_for_works(["1", "2\x00"])

        assert list(outcomes) == ["1", "2\x00"]
        assert outcomes["1"].chapters[0].id == "10"
        assert outcomes["2\x00"].failure is FailureKind.FETCH

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_affect_others(self, client_factory):
        def handler(request):
            if request.url.path.startswith("/works/2/"):
                raise RuntimeError("handler bug")
            return html_response("<html></html>")

        service = ChapterService(client_factory(handler))

        outcomes = await service.fetch_chapters_for_works(["1", "2", "3"])

        assert outcomes["1"].ok
        assert outcomes["3"].ok
        assert outcomes["2"].failure is FailureKind.UNEXPECTED
        assert outcomes["2"].message == "handler bug"

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self, client_factory):
        in_flight = 0
        peak = 0

        async def handler(request):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return html_response("<html></html>")

        service = ChapterService(client_factory(handler), max_concurrent=2)

        outcomes = await service.fetch_chapters_for_works([str(i) for i in range(6)])

        assert len(outcomes) == 6
        assert all(outcome.ok for outcome in outcomes.values())
        assert peak <= 2


class TestFetchPageSummary:
    """Tests for ChapterService.fetch_page_summary."""

    @pytest.mark.asyncio
    async def test_summary(self, client_factory, load_fixture):
        html = load_fixture("generic_page.html")
        service = ChapterService(client_factory(lambda request: html_response(html)))

        summary = await service.fetch_page_summary("https://archiveofourown.org/")

        assert summary.title == "Archive of Our Own"
        assert len(summary.headings) == 3

    @pytest.mark.asyncio
    async def test_failure_returns_none(self, client_factory):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        service = ChapterService(client_factory(handler))

        assert await service.fetch_page_summary("https://archiveofourown.org/") is None

    @pytest.mark.asyncio
    async def test_parse_failure_returns_none(self, client_factory):
        service = ChapterService(
            client_factory(lambda request: html_response("<html></html>")),
            adapter=RejectingAdapter(),
        )

        assert await service.fetch_page_summary("/") is None
