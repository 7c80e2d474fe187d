"""Tests for the visibility / editability classifier and the soup adapter."""

from __future__ import annotations

import pytest

import md2editor
from md2editor.classifier import (
    Candidate,
    is_visible,
    resolve_editable_target,
    visible_editable_targets,
)
from md2editor.dom import Element, Page, Rect
from md2editor.soup import SoupPage

PAGE_HTML = """
<main>
  <div id="wrap" data-rect="0 0 600 100">
    <span id="label">Story</span>
    <div id="inner" contenteditable="true" data-placeholder="Write here"
         aria-label="Body" data-rect="10 0 600 40">Some text</div>
  </div>
  <div id="doc" contenteditable data-rect="120 0 600 200">
    <p id="child" data-rect="130 0 600 20">child</p>
  </div>
  <div id="frozen" contenteditable="false" data-rect="400 0 600 20"></div>
  <input id="name" type="text" placeholder="Your name" data-rect="200 0 300 20">
  <input id="secret" type="hidden" name="csrf">
  <input id="agree" type="checkbox" data-rect="250 0 10 10">
  <textarea id="notes" data-rect="300 0 300 80"></textarea>
  <div id="ghost" contenteditable data-rect="0 0 0 0"></div>
  <div id="nobox" role="textbox"></div>
  <p id="plain" data-rect="350 0 100 20">text</p>
</main>
"""


@pytest.fixture
def page() -> SoupPage:
    return SoupPage(PAGE_HTML)


def node(page: SoupPage, node_id: str):
    el = page.query_selector(f"#{node_id}")
    assert el is not None, node_id
    return el


class TestSoupAdapter:
    def test_satisfies_protocols(self, page: SoupPage) -> None:
        assert isinstance(page, Page)
        assert isinstance(node(page, "inner"), Element)

    def test_exported_from_package(self) -> None:
        assert md2editor.SoupPage is SoupPage
        assert "SoupPage" in md2editor.__all__

    def test_identity_equality(self, page: SoupPage) -> None:
        assert node(page, "inner") == node(page, "inner")
        assert node(page, "ghost") != node(page, "frozen")
        assert len({node(page, "inner"), node(page, "inner")}) == 1

    def test_empty_elements_are_distinct(self) -> None:
        page = SoupPage("<div contenteditable></div><div contenteditable></div>")
        first, second = page.query_selector_all("div")
        assert first != second

    def test_bounding_box(self, page: SoupPage) -> None:
        assert node(page, "name").bounding_box() == Rect(top=200, left=0, width=300, height=20)
        assert node(page, "nobox").bounding_box() == Rect()

    @pytest.mark.parametrize("rect", ["1 2 3", "1 2 3 4 5", "top 0 10 10"])
    def test_bad_rect_is_not_rendered(self, rect: str) -> None:
        page = SoupPage(f'<div data-rect="{rect}"></div>')
        el = page.query_selector("div")
        assert el.bounding_box() == Rect()
        assert not is_visible(el)

    def test_content_editable_inherited(self, page: SoupPage) -> None:
        assert node(page, "child").is_content_editable
        assert not node(page, "frozen").is_content_editable
        assert not node(page, "plain").is_content_editable


class TestIsVisible:
    def test_visible(self, page: SoupPage) -> None:
        assert is_visible(node(page, "wrap"))

    def test_zero_box_hidden(self, page: SoupPage) -> None:
        assert not is_visible(node(page, "ghost"))
        assert not is_visible(node(page, "nobox"))

    def test_none(self) -> None:
        assert not is_visible(None)

    def test_zero_width_only(self) -> None:
        page = SoupPage('<div data-rect="10 10 0 30"></div>')
        assert not is_visible(page.query_selector("div"))


class TestResolveEditableTarget:
    @pytest.mark.parametrize("node_id", ["inner", "name", "notes", "doc", "nobox"])
    def test_self(self, page: SoupPage, node_id: str) -> None:
        el = node(page, node_id)
        assert resolve_editable_target(el) == el

    def test_descendant(self, page: SoupPage) -> None:
        assert resolve_editable_target(node(page, "wrap")) == node(page, "inner")

    def test_inside_editable_region(self, page: SoupPage) -> None:
        assert resolve_editable_target(node(page, "child")) == node(page, "child")

    @pytest.mark.parametrize("node_id", ["plain", "secret", "agree", "frozen"])
    def test_not_editable(self, page: SoupPage, node_id: str) -> None:
        assert resolve_editable_target(node(page, node_id)) is None

    def test_none(self) -> None:
        assert resolve_editable_target(None) is None

    def test_idempotent(self, page: SoupPage) -> None:
        for node_id in ("wrap", "plain", "ghost", "name"):
            el = node(page, node_id)
            assert resolve_editable_target(el) == resolve_editable_target(el)
            assert is_visible(el) == is_visible(el)


class TestVisibleEditableTargets:
    def test_document_order_visible_only(self, page: SoupPage) -> None:
        ids = [el.get_attribute("id") for el in visible_editable_targets(page)]
        assert ids == ["inner", "doc", "name", "notes"]

    def test_empty_page(self) -> None:
        assert visible_editable_targets(SoupPage("<p>nothing</p>")) == []


class TestCandidate:
    def test_attributes(self, page: SoupPage) -> None:
        candidate = Candidate.from_element(node(page, "inner"))
        assert candidate.placeholder == "Write here"
        assert candidate.label == "Body"
        assert candidate.text_length == len("Some text")
        assert candidate.rect.bottom == 50
        assert not candidate.is_short

    def test_native_placeholder(self, page: SoupPage) -> None:
        candidate = Candidate.from_element(node(page, "name"))
        assert candidate.placeholder == "Your name"
        assert candidate.label == ""
        assert candidate.is_short
