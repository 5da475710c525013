"""Web scraper for archiveofourown.org."""

from ao3nav.scraper.client import ArchiveClient
from ao3nav.scraper.document import DocumentAdapter, NodeKind, SoupAdapter
from ao3nav.scraper.navigate_parser import ChapterRecord, NavigatePageParser, extract_chapters
from ao3nav.scraper.page_parser import Link, PageParser, PageSummary, extract_page_summary
from ao3nav.scraper.text import reconstruct_text

__all__ = [
    "ArchiveClient",
    "ChapterRecord",
    "DocumentAdapter",
    "Link",
    "NavigatePageParser",
    "NodeKind",
    "PageParser",
    "PageSummary",
    "SoupAdapter",
    "extract_chapters",
    "extract_page_summary",
    "reconstruct_text",
]
