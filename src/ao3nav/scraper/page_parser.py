"""Generic page extraction: title, top-level headings and links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ao3nav.scraper.document import DocumentAdapter, default_adapter
from ao3nav.scraper.text import reconstruct_text


@dataclass(frozen=True)
class Link:
    """An anchor found on a page."""

    text: str | None
    href: str | None


@dataclass(frozen=True)
class PageSummary:
    """Title, h1 headings and links of a page, in document order."""

    title: str = ""
    headings: tuple[str | None, ...] = field(default_factory=tuple)
    links: tuple[Link, ...] = field(default_factory=tuple)


def extract_page_summary(document: Any, adapter: DocumentAdapter | None = None) -> PageSummary:
    """Summarize a parsed document.

    Headings with no text come through as None and anchors are never
    filtered, so callers see exactly what the page contains.
    """
    adapter = adapter or default_adapter

    title = ""
    titles = adapter.find_by_tag(document, "title")
    if titles:
        title = "".join(adapter.text_payload(child) for child in adapter.children(titles[0]))

    headings = tuple(
        reconstruct_text(heading, adapter) for heading in adapter.find_by_tag(document, "h1")
    )
    links = tuple(
        Link(text=reconstruct_text(anchor, adapter), href=adapter.attribute(anchor, "href"))
        for anchor in adapter.find_by_tag(document, "a")
    )
    return PageSummary(title=title, headings=headings, links=links)


class PageParser:
    """Parser for an arbitrary HTML page."""

    def __init__(self, html: str, adapter: DocumentAdapter | None = None) -> None:
        self.adapter = adapter or default_adapter
        self.document = self.adapter.parse(html)

    def parse(self) -> PageSummary:
        return extract_page_summary(self.document, self.adapter)


def parse_page_summary(html: str) -> PageSummary:
    """Convenience function to summarize a page from HTML."""
    return PageParser(html).parse()
