"""Typed CSS-selector access to parsed HTML.

Wraps BeautifulSoup tags in :class:`HtmlNode` so extractors work against an
explicit query surface: element selection, attribute access and ordered
child traversal.  Every list returned here is in **document order**; the
extractors rely on that for their first-match and positional rules.

Extraction helpers accept a primary selector and optional
*fallback_selectors*; the first selector that yields at least one match
wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True)
class HtmlNode:
    """Read-only view of one element (or the document root)."""

    _tag: BeautifulSoup | Tag

    @property
    def tag_name(self) -> str:
        return self._tag.name or ""

    def select(self, selector: str) -> list[HtmlNode]:
        """All descendants matching *selector*, in document order."""
        return [HtmlNode(t) for t in self._tag.select(selector)]

    def select_one(self, selector: str) -> HtmlNode | None:
        """First descendant matching *selector* in document order."""
        found = self._tag.select_one(selector)
        return HtmlNode(found) if found is not None else None

    def attr(self, name: str) -> str | None:
        """Attribute value; missing and empty values are both ``None``."""
        value = self._tag.get(name)
        if isinstance(value, list):  # multi-valued attributes like class
            value = " ".join(value)
        return str(value) if value else None

    def data(self, name: str) -> str | None:
        """Value of the ``data-<name>`` attribute."""
        return self.attr(f"data-{name}")

    def children(self) -> list[HtmlNode]:
        """Direct element children in document order."""
        return [HtmlNode(c) for c in self._tag.children if isinstance(c, Tag)]

    def text(self, *, strip: bool = True) -> str:
        return self._tag.get_text(strip=strip)


def parse_html(html: str) -> HtmlNode:
    """Parse an HTML string into the document root node.

    Uses the ``lxml`` parser for speed.
    """
    return HtmlNode(BeautifulSoup(html, "lxml"))


def select_items(
    root: HtmlNode,
    selector: str,
    *fallback_selectors: str,
) -> list[HtmlNode]:
    """Select elements via CSS with a fallback chain.

    Tries each selector in order.  Returns results from the **first**
    selector that matches at least one element.
    """
    for sel in (selector, *fallback_selectors):
        items = root.select(sel)
        if items:
            return items
    return []


def extract_attr(
    element: HtmlNode,
    selector: str,
    attr: str,
    *fallback_selectors: str,
) -> str | None:
    """Extract an attribute from the first matching child element.

    With ``selector=""`` the attribute is read from *element* itself.
    Only the first match per selector is consulted; a first match without
    the attribute moves on to the next fallback selector.
    """
    if selector == "":
        return element.attr(attr)

    for sel in (selector, *fallback_selectors):
        match = element.select_one(sel)
        if match is not None:
            value = match.attr(attr)
            if value:
                return value
    return None
