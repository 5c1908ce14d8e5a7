"""Thin wrapper around BeautifulSoup used by every extractor."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class Document:
    """A parsed HTML page with CSS-selector lookups.

    ``html.parser`` never rejects input, so any string (even an empty one)
    produces a tree. Lookups accept ``None`` scopes so extractors can chain
    them without checking each step.
    """

    def __init__(self, html: str | bytes) -> None:
        self.soup = BeautifulSoup(html or "", "html.parser")

    def select_one(self, selector: str, scope: Tag | None = None) -> Tag | None:
        root = self.soup if scope is None else scope
        return root.select_one(selector)

    def select(self, selector: str, scope: Tag | None = None) -> list[Tag]:
        root = self.soup if scope is None else scope
        return list(root.select(selector))


def attr(node: Tag | None, name: str) -> str | None:
    """Read an attribute; multi-valued attributes (class) are space-joined."""
    if node is None:
        return None
    value = node.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


def text(node: Tag | None) -> str | None:
    """Trimmed text content, or None when the node is missing."""
    if node is None:
        return None
    return node.get_text().strip()


def classes(node: Tag | None) -> list[str]:
    if node is None:
        return []
    return list(node.get("class") or [])
