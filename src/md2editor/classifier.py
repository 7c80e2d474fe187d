"""Visibility and editability classification of page elements.

All functions are pure reads over the :class:`~md2editor.dom.Element`
protocol: applying them twice to an unchanged node gives the same answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from md2editor.dom import Element, Page, Rect

TEXT_INPUT_SELECTOR = (
    'textarea, input:not([type="hidden"]):not([type="checkbox"])'
    ':not([type="radio"]):not([type="button"]):not([type="submit"])'
    ':not([type="reset"]):not([type="image"]):not([type="file"])'
)
EDITABLE_MARK_SELECTOR = '[contenteditable]:not([contenteditable="false"]), [role="textbox"]'
EDITABLE_SELECTOR = f"{EDITABLE_MARK_SELECTOR}, {TEXT_INPUT_SELECTOR}"

SHORT_TEXT_LENGTH = 5


def is_visible(el: Optional[Element]) -> bool:
    """True iff *el* has a rendered box with positive width and height."""
    if el is None:
        return False
    rect = el.bounding_box()
    return rect.width > 0 and rect.height > 0


def is_text_input(el: Element) -> bool:
    return el.matches(TEXT_INPUT_SELECTOR)


def resolve_editable_target(el: Optional[Element]) -> Optional[Element]:
    """Return the node under *el* that actually accepts typed text.

    That is *el* itself when it is a native text input or editable-marked,
    otherwise its first matching descendant in document order.
    """
    if el is None:
        return None
    if is_text_input(el):
        return el
    if el.is_content_editable or el.matches(EDITABLE_MARK_SELECTOR):
        return el
    return el.query_selector(EDITABLE_SELECTOR)


def visible_editable_targets(page: Page) -> list[Element]:
    """Collect every visible effective input node on *page*, in document order."""
    targets: list[Element] = []
    seen: set[Element] = set()
    for node in page.query_selector_all(EDITABLE_SELECTOR):
        target = resolve_editable_target(node)
        if target is None or target in seen or not is_visible(target):
            continue
        seen.add(target)
        targets.append(target)
    return targets


def count_editable_nodes(page: Page) -> int:
    return len(page.query_selector_all(EDITABLE_SELECTOR))


@dataclass(frozen=True)
class Candidate:
    """An effective input node with the attributes the scorer reads."""

    target: Element
    rect: Rect
    placeholder: str
    label: str
    text_length: int

    @classmethod
    def from_element(cls, target: Element) -> Candidate:
        placeholder = (
            target.get_attribute("data-placeholder")
            or target.get_attribute("placeholder")
            or ""
        )
        return cls(
            target=target,
            rect=target.bounding_box(),
            placeholder=placeholder,
            label=target.get_attribute("aria-label") or "",
            text_length=len(target.text_content.strip()),
        )

    @property
    def hint_text(self) -> str:
        """Placeholder and label text joined for pattern matching."""
        return f"{self.placeholder} {self.label}"

    @property
    def is_short(self) -> bool:
        return self.text_length < SHORT_TEXT_LENGTH
