"""Helpers for moving between chapters of a work."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ao3nav.scraper.navigate_parser import ChapterRecord


@dataclass(frozen=True)
class ChapterPosition:
    """A chapter together with where it sits in its work's chapter list."""

    chapter: ChapterRecord
    index: int
    has_next: bool
    has_previous: bool


def _position(chapters: Sequence[ChapterRecord], index: int) -> ChapterPosition | None:
    if not 0 <= index < len(chapters):
        return None
    return ChapterPosition(
        chapter=chapters[index],
        index=index,
        has_next=index < len(chapters) - 1,
        has_previous=index > 0,
    )


def find_chapter_index(chapters: Sequence[ChapterRecord], chapter_id: str) -> int | None:
    """Get the index of the chapter with the given id, or None."""
    for index, chapter in enumerate(chapters):
        if chapter.id is not None and chapter.id == str(chapter_id):
            return index
    return None


def next_chapter(chapters: Sequence[ChapterRecord], index: int) -> ChapterPosition | None:
    """Get the chapter after ``index``, or None at the last chapter."""
    if not 0 <= index < len(chapters):
        return None
    return _position(chapters, index + 1)


def previous_chapter(chapters: Sequence[ChapterRecord], index: int) -> ChapterPosition | None:
    """Get the chapter before ``index``, or None at the first chapter."""
    if not 0 <= index < len(chapters):
        return None
    return _position(chapters, index - 1)
