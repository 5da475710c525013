"""Text reconstruction across nested inline markup."""

from __future__ import annotations

from typing import Any

from ao3nav.scraper.document import DocumentAdapter, NodeKind, default_adapter


def reconstruct_text(node: Any, adapter: DocumentAdapter | None = None) -> str | None:
    """Concatenate all text under a node into one trimmed string.

    Text children contribute their raw payload; element children contribute
    their own reconstructed (trimmed) text. Only leaves and the final result
    are trimmed, so whitespace between words split across inline elements is
    kept.

    The walk uses an explicit stack instead of recursion because archive
    markup is untrusted and may be nested arbitrarily deep.

    Args:
        node: An element or text node, or None.
        adapter: Document adapter that produced the node.

    Returns:
        The reconstructed text, or None if the node is None or holds no
        non-whitespace text.
    """
    if node is None:
        return None
    adapter = adapter or default_adapter

    if adapter.node_kind(node) is NodeKind.TEXT:
        return adapter.text_payload(node).strip() or None

    # Each frame is (remaining children, collected text parts)
    stack = [(iter(adapter.children(node)), [])]
    while True:
        children, parts = stack[-1]
        for child in children:
            if adapter.node_kind(child) is NodeKind.TEXT:
                parts.append(adapter.text_payload(child))
            else:
                stack.append((iter(adapter.children(child)), []))
                break
        else:
            stack.pop()
            text = "".join(parts).strip()
            if not stack:
                return text or None
            stack[-1][1].append(text)
