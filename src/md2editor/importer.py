"""Write converted Markdown into the editors of a live page.

This is the injection step: it resolves the title and body editors with
:class:`~md2editor.resolver.EditorResolver`, then writes the title as plain
text and the body as HTML through the page's insertion primitives.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from md2editor.classifier import is_text_input
from md2editor.config import RenderConfig
from md2editor.converter import Converter
from md2editor.dom import Element, Page
from md2editor.parser import UNTITLED
from md2editor.renderer import html_to_text
from md2editor.resolver import DEFAULT_TIMEOUT_MS, EditorResolver, Resolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    title: str
    html_length: int


def replace_text(el: Element, text: str) -> None:
    """Replace the whole content of *el* with plain *text*."""
    el.focus()
    if is_text_input(el):
        el.set_value(text)
    else:
        el.insert_text(text)


def replace_html(el: Element, fragment: str) -> None:
    """Replace the whole content of *el* with *fragment*.

    Native inputs get the flattened text.  Editable regions that refuse HTML
    insertion get the plain-text fallback instead.
    """
    el.focus()
    if is_text_input(el):
        el.set_value(html_to_text(fragment))
        return
    if not el.insert_html(fragment):
        logger.info("HTML insertion refused, inserting plain text instead")
        el.insert_text(html_to_text(fragment))


class EditorImporter:
    """Import Markdown documents into the title and body editors of *page*."""

    def __init__(
        self,
        page: Page,
        config: Optional[RenderConfig] = None,
        *,
        timeout_ms: float = DEFAULT_TIMEOUT_MS,
    ) -> None:
        self.page = page
        self.converter = Converter(config=config or RenderConfig.preset("medium"))
        self.resolver = EditorResolver(page)
        self.timeout_ms = timeout_ms

    async def _resolve(self) -> Resolution:
        return await self.resolver.wait_for_editors(self.timeout_ms)

    async def import_markdown(self, markdown_text: str) -> ImportResult:
        """Write the title and rendered body of *markdown_text* into the page.

        Raises:
            EmptyInputError: the document is blank.
            NoTitleTargetError, NoBodyTargetError: an editor was not found.
            TargetConflictError: title and body resolved to the same node.
        """
        result = self.converter.convert_text(markdown_text)
        resolution = (await self._resolve()).require()

        replace_text(resolution.title, result.title)
        replace_html(resolution.body, result.html)
        logger.info("Imported %r (%d bytes of HTML)", result.title, len(result.html))
        return ImportResult(title=result.title, html_length=len(result.html))

    async def set_title(self, title: str) -> None:
        """Write *title* into the title editor only."""
        resolution = (await self._resolve()).require(body=False)
        replace_text(resolution.title, title or UNTITLED)

    async def clear_body(self) -> Element:
        """Empty the body editor and focus it, ready for a manual paste."""
        resolution = (await self._resolve()).require(title=False)
        replace_text(resolution.body, "")
        resolution.body.focus()
        return resolution.body
