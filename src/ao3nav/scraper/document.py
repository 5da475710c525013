"""HTML document adapter.

Extractors only talk to the parsed tree through the small capability set
defined by :class:`DocumentAdapter`, so the HTML library backing it can be
swapped without touching extraction logic. :class:`SoupAdapter` is the
BeautifulSoup/lxml implementation used by default.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Protocol, Union

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from ao3nav.errors import ParseFailure

Node = Union[Tag, NavigableString]
ParsedDocument = BeautifulSoup


class NodeKind(str, Enum):
    """Kind of a node in the parsed tree."""

    ELEMENT = "element"
    TEXT = "text"


class DocumentAdapter(Protocol):
    """Minimal tree interface used by the extractors."""

    def parse(self, html: str) -> Any: ...

    def find_by_tag(self, node: Any, tag_name: str) -> Sequence[Any]: ...

    def find_by_class(self, node: Any, class_name: str) -> Sequence[Any]: ...

    def attribute(self, node: Any, name: str) -> str | None: ...

    def children(self, node: Any) -> Sequence[Any]: ...

    def node_kind(self, node: Any) -> NodeKind: ...

    def text_payload(self, node: Any) -> str: ...


def _class_tokens(tag: Tag) -> set[str]:
    value = tag.get("class")
    if not value:
        return set()
    if isinstance(value, str):
        return set(value.split())
    return set(value)


class SoupAdapter:
    """Document adapter backed by BeautifulSoup with the lxml parser."""

    def __init__(self, features: str = "lxml") -> None:
        self.features = features

    def parse(self, html: str) -> ParsedDocument:
        """Parse HTML into a tree.

        Malformed markup is repaired by the parser; only input that cannot be
        treated as markup at all raises.

        Raises:
            ParseFailure: If the input is not text or the parser rejects it.
        """
        if not isinstance(html, str):
            raise ParseFailure(f"Expected HTML text, got {type(html).__name__}")
        try:
            return BeautifulSoup(html, self.features)
        except ParserRejectedMarkup as exc:
            raise ParseFailure(str(exc)) from exc

    def find_by_tag(self, node: Node, tag_name: str) -> list[Tag]:
        """All descendant elements with the given tag name, in document order."""
        if not isinstance(node, Tag):
            return []
        return node.find_all(tag_name.lower())

    def find_by_class(self, node: Node, class_name: str) -> list[Tag]:
        """All descendant elements carrying every class token in ``class_name``.

        ``"chapter index group"`` matches ``class="group chapter index"`` as
        well as ``class="chapter index group wide"``.
        """
        if not isinstance(node, Tag):
            return []
        wanted = set(class_name.split())
        if not wanted:
            return []
        return node.find_all(lambda tag: wanted <= _class_tokens(tag))

    def attribute(self, node: Node, name: str) -> str | None:
        if not isinstance(node, Tag):
            return None
        value = node.get(name)
        if value is None:
            return None
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def children(self, node: Node) -> list[Node]:
        """Element and text children in source order.

        Comments, doctypes and processing instructions are skipped.
        """
        if not isinstance(node, Tag):
            return []
        return [
            child
            for child in node.children
            if isinstance(child, Tag)
            or (isinstance(child, NavigableString) and not isinstance(child, PreformattedString))
        ]

    def node_kind(self, node: Node) -> NodeKind:
        if isinstance(node, Tag):
            return NodeKind.ELEMENT
        return NodeKind.TEXT

    def text_payload(self, node: Node) -> str:
        if isinstance(node, Tag):
            return ""
        return str(node)


default_adapter = SoupAdapter()
