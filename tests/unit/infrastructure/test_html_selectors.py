"""Tests for the HtmlNode selector layer."""

from __future__ import annotations

from cinebyarr.infrastructure.common.html_selectors import (
    extract_attr,
    parse_html,
    select_items,
)

_HTML = """\
<div id="root" class="a b">
  <ul>
    <li data-n="1"><a href="/one">One</a></li>
    <li data-n="2"><a href="">Empty</a></li>
    <li><a href="/three">Three</a></li>
  </ul>
  <video><source src="https://cdn/v.mp4"></video>
</div>
"""


class TestHtmlNode:
    def test_select_keeps_document_order(self) -> None:
        root = parse_html(_HTML)
        assert [a.text() for a in root.select("li a")] == ["One", "Empty", "Three"]

    def test_select_one_missing_is_none(self) -> None:
        assert parse_html(_HTML).select_one("table") is None

    def test_empty_attribute_is_none(self) -> None:
        links = parse_html(_HTML).select("li a")
        assert links[0].attr("href") == "/one"
        assert links[1].attr("href") is None

    def test_multi_valued_attribute_joined(self) -> None:
        node = parse_html(_HTML).select_one("#root")
        assert node is not None
        assert node.attr("class") == "a b"

    def test_data_attribute(self) -> None:
        items = parse_html(_HTML).select("li")
        assert [i.data("n") for i in items] == ["1", "2", None]

    def test_children_are_elements_only(self) -> None:
        ul = parse_html(_HTML).select_one("ul")
        assert ul is not None
        assert [c.tag_name for c in ul.children()] == ["li", "li", "li"]


class TestSelectItems:
    def test_fallback_used_when_primary_empty(self) -> None:
        root = parse_html(_HTML)
        items = select_items(root, "table tr", "li")
        assert len(items) == 3

    def test_no_match_is_empty(self) -> None:
        assert select_items(parse_html(_HTML), "table", "form") == []


class TestExtractAttr:
    def test_own_attribute_with_empty_selector(self) -> None:
        link = parse_html(_HTML).select("li a")[2]
        assert extract_attr(link, "", "href") == "/three"

    def test_first_match_only(self) -> None:
        ul = parse_html(_HTML).select_one("ul")
        assert ul is not None
        assert extract_attr(ul, "a", "href") == "/one"

    def test_falls_back_when_first_match_lacks_attribute(self) -> None:
        root = parse_html(_HTML)
        assert extract_attr(root, "video", "src", "source") == "https://cdn/v.mp4"

    def test_nothing_found(self) -> None:
        assert extract_attr(parse_html(_HTML), "iframe", "src") is None
