"""BeautifulSoup adapter implementing the :mod:`md2editor.dom` protocols.

A :class:`SoupPage` wraps a DOM snapshot.  Static HTML carries no layout, so
each element's rendered box is read from a ``data-rect`` attribute holding
``"top left width height"`` (as written by whatever captured the snapshot).
Elements without one, or with an unparsable one, have an empty box, i.e.
they are not rendered.

Usage::

    page = SoupPage('<div contenteditable data-rect="0 0 600 40"></div>')
    resolution = await EditorResolver(page).wait_for_editors(500)
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from md2editor.dom import Rect

logger = logging.getLogger(__name__)

RECT_ATTR = "data-rect"
_RECT_SPLIT_RE = re.compile(r"[\s,]+")


def _parse_rect(value: Optional[str]) -> Rect:
    if not value:
        return Rect()
    parts = [p for p in _RECT_SPLIT_RE.split(value.strip()) if p]
    try:
        top, left, width, height = (float(p) for p in parts)
    except ValueError:
        logger.debug("Ignoring invalid %s %r", RECT_ATTR, value)
        return Rect()
    return Rect(top=top, left=left, width=width, height=height)


class SoupElement:
    """One element of a :class:`SoupPage`, compared by node identity."""

    def __init__(self, tag: Tag, page: SoupPage) -> None:
        self.tag = tag
        self.page = page

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupElement) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"<SoupElement {self.tag.name} {dict(self.tag.attrs)!r}>"

    # -- queries ------------------------------------------------------------

    def matches(self, selector: str) -> bool:
        return bool(self.tag.css.match(selector))

    def query_selector(self, selector: str) -> Optional[SoupElement]:
        found = self.tag.select_one(selector)
        return self.page.wrap(found) if found is not None else None

    def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    @property
    def is_content_editable(self) -> bool:
        for node in [self.tag, *self.tag.parents]:
            if not isinstance(node, Tag):
                continue
            value = node.get("contenteditable")
            if value is None:
                continue
            return value.strip().lower() != "false"
        return False

    @property
    def text_content(self) -> str:
        return self.tag.get_text()

    @property
    def value(self) -> str:
        if self.tag.name == "textarea":
            return self.tag.get_text()
        return self.get_attribute("value") or ""

    def bounding_box(self) -> Rect:
        return _parse_rect(self.get_attribute(RECT_ATTR))

    # -- insertion ----------------------------------------------------------

    def focus(self) -> None:
        self.page.focused = self

    def set_value(self, text: str) -> None:
        if self.tag.name == "textarea":
            self.tag.clear()
            self.tag.append(NavigableString(text))
        else:
            self.tag["value"] = text

    def insert_text(self, text: str) -> None:
        self.tag.clear()
        if text:
            self.tag.append(NavigableString(text))

    def insert_html(self, html: str) -> bool:
        fragment = BeautifulSoup(html, "html.parser")
        self.tag.clear()
        for child in list(fragment.contents):
            self.tag.append(child.extract())
        return True


class SoupPage:
    """A DOM snapshot queryable by CSS selector."""

    def __init__(self, html: str, parser: str = "html.parser") -> None:
        self.soup = BeautifulSoup(html, parser)
        self.focused: Optional[SoupElement] = None

    def wrap(self, tag: Tag) -> SoupElement:
        return SoupElement(tag, self)

    def query_selector_all(self, selector: str) -> list[SoupElement]:
        return [self.wrap(tag) for tag in self.soup.select(selector)]

    def query_selector(self, selector: str) -> Optional[SoupElement]:
        found = self.soup.select_one(selector)
        return self.wrap(found) if found is not None else None

    @property
    def html(self) -> str:
        return str(self.soup)
