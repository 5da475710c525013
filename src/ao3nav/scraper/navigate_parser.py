"""Parser for a work's chapter navigation page on archiveofourown.org."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ao3nav.scraper.document import DocumentAdapter, default_adapter
from ao3nav.scraper.text import reconstruct_text

CHAPTER_INDEX_CLASS = "chapter index group"
DATETIME_CLASS = "datetime"

_CHAPTER_ID_RE = re.compile(r"/chapters/(\d+)")


@dataclass(frozen=True)
class ChapterRecord:
    """A chapter listed on a work's navigate page.

    Fields other than ``work_id`` are None when the markup did not provide
    them.
    """

    id: str | None
    name: str | None
    work_id: str
    date: str | None


def extract_chapter_id(href: str | None) -> str | None:
    """Get the numeric chapter id from a chapter link.

    Args:
        href: Link target such as '/works/5/chapters/123'.

    Returns:
        The digits following '/chapters/', or None.
    """
    if not href:
        return None
    match = _CHAPTER_ID_RE.search(href)
    if match:
        return match.group(1)
    return None


def normalize_date(date_text: str | None) -> str | None:
    """Remove the parentheses the archive wraps chapter dates in."""
    if date_text is None:
        return None
    return date_text.replace("(", "").replace(")", "")


def _parse_chapter_item(
    item: Any, work_id: str, adapter: DocumentAdapter
) -> ChapterRecord | None:
    anchors = adapter.find_by_tag(item, "a")
    if not anchors:
        return None
    anchor = anchors[0]

    href = adapter.attribute(anchor, "href")
    dates = adapter.find_by_class(item, DATETIME_CLASS)
    date_text = reconstruct_text(dates[0], adapter) if dates else None

    return ChapterRecord(
        id=extract_chapter_id(href),
        name=reconstruct_text(anchor, adapter),
        work_id=work_id,
        date=normalize_date(date_text),
    )


def extract_chapters(
    document: Any, work_id: str, adapter: DocumentAdapter | None = None
) -> list[ChapterRecord]:
    """Extract the chapter list from a parsed navigate page.

    Args:
        document: The parsed navigate page.
        work_id: Id of the work the page belongs to.
        adapter: Document adapter that produced ``document``.

    Returns:
        One record per chapter list item that has a link, in page order.
        Empty when the page has no chapter index.
    """
    adapter = adapter or default_adapter

    containers = adapter.find_by_class(document, CHAPTER_INDEX_CLASS)
    if not containers:
        return []

    chapters: list[ChapterRecord] = []
    for item in adapter.find_by_tag(containers[0], "li"):
        chapter = _parse_chapter_item(item, work_id, adapter)
        if chapter:
            chapters.append(chapter)
    return chapters


class NavigatePageParser:
    """Parser for a work's navigate page."""

    def __init__(self, html: str, adapter: DocumentAdapter | None = None) -> None:
        self.adapter = adapter or default_adapter
        self.document = self.adapter.parse(html)

    def validate_structure(self) -> list[str]:
        """Check that expected page landmarks exist.

        Returns:
            List of warning messages for missing elements.
        """
        warnings = []
        containers = self.adapter.find_by_class(self.document, CHAPTER_INDEX_CLASS)
        if not containers:
            warnings.append(f"Missing chapter index container (.{CHAPTER_INDEX_CLASS.replace(' ', '.')})")
        elif not self.adapter.find_by_tag(containers[0], "li"):
            warnings.append("No <li> chapter entries found in chapter index")
        return warnings

    def has_chapter_index(self) -> bool:
        return bool(self.adapter.find_by_class(self.document, CHAPTER_INDEX_CLASS))

    def parse(self, work_id: str) -> list[ChapterRecord]:
        """Parse all chapters listed on the page."""
        return extract_chapters(self.document, work_id, self.adapter)


def parse_chapters(html: str, work_id: str) -> list[ChapterRecord]:
    """Convenience function to parse chapters from navigate page HTML."""
    return NavigatePageParser(html).parse(work_id)
