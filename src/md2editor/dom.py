"""Capability interface over a live, DOM-like page.

The resolver and classifier only talk to these protocols, so they can run
against a browser bridge, a :mod:`md2editor.soup` snapshot, or a test fake.
Element identity matters: two elements compare equal only when they wrap the
same underlying node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class Rect:
    """Rendered bounding box in page coordinates."""

    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def bottom(self) -> float:
        return self.top + self.height


@runtime_checkable
class Element(Protocol):
    def matches(self, selector: str) -> bool: ...

    def query_selector(self, selector: str) -> Optional[Element]: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    @property
    def is_content_editable(self) -> bool: ...

    @property
    def text_content(self) -> str: ...

    def bounding_box(self) -> Rect: ...

    # -- insertion primitives -------------------------------------------

    def focus(self) -> None: ...

    def set_value(self, text: str) -> None:
        """Replace the value of a native input."""

    def insert_text(self, text: str) -> None:
        """Select all content of an editable region and replace it with text."""

    def insert_html(self, html: str) -> bool:
        """Replace all content with *html*; False if the host refused it."""


@runtime_checkable
class Page(Protocol):
    def query_selector_all(self, selector: str) -> list[Element]: ...
