"""Error types and fetch outcomes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ao3nav.scraper.navigate_parser import ChapterRecord


class ScraperError(Exception):
    """Base class for errors raised while fetching or parsing archive pages."""


class FetchFailure(ScraperError):
    """A page could not be fetched (transport error, bad status or non-HTML body)."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseFailure(ScraperError):
    """The HTML adapter could not build a tree from the input."""


class FailureKind(str, Enum):
    """Why a fetch produced no result."""

    FETCH = "fetch"
    PARSE = "parse"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class FetchOutcome:
    """Result of fetching the chapter list of one work.

    A successful outcome with no chapters means the work page had no
    chapter index; a failed outcome means the page never got that far.
    """

    chapters: tuple[ChapterRecord, ...] = field(default_factory=tuple)
    failure: FailureKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, chapters: Iterable[ChapterRecord]) -> FetchOutcome:
        return cls(chapters=tuple(chapters))

    @classmethod
    def failed(cls, kind: FailureKind, message: str | None = None) -> FetchOutcome:
        return cls(failure=kind, message=message)
