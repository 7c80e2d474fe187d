"""High-level Markdown-to-editor conversion orchestrator.

Ties together the title extractor, block parser and HTML renderer into a
single public API for converting Markdown text into a title string and an
HTML fragment ready for a contenteditable surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from md2editor.config import PRESETS, RenderConfig
from md2editor.errors import EmptyInputError
from md2editor.parser import UNTITLED, BlockParser, extract_title
from md2editor.renderer import HtmlRenderer


@dataclass(frozen=True)
class ConversionResult:
    title: str
    html: str


def render_markdown(markdown_text: str, config: Optional[RenderConfig] = None) -> str:
    """Render *markdown_text* to an HTML fragment using *config*."""
    config = config or RenderConfig()
    blocks = BlockParser(config).parse(markdown_text)
    return HtmlRenderer(config).render(blocks)


class Converter:
    """Convert Markdown content for a rich-text editor.

    Usage::

        converter = Converter(preset="medium")
        result = converter.convert_text("# Hello\\n\\nWorld")
        result.title   # "Hello"
        result.html    # "<p>World</p>"
    """

    PRESETS = PRESETS

    def __init__(
        self,
        preset: str = "default",
        *,
        config: Optional[RenderConfig] = None,
    ) -> None:
        self.preset = preset
        self.config = config or RenderConfig.preset(preset)

    def render(self, markdown_text: str) -> str:
        """Convert Markdown text to an HTML fragment."""
        return render_markdown(markdown_text, self.config)

    def extract_title(self, markdown_text: str, fallback: str = UNTITLED) -> str:
        return extract_title(markdown_text, fallback)

    def convert_text(self, markdown_text: str) -> ConversionResult:
        """Convert Markdown text to a title and HTML body.

        Raises:
            EmptyInputError: *markdown_text* is blank or whitespace-only.
        """
        if not markdown_text.strip():
            raise EmptyInputError()
        return ConversionResult(
            title=self.extract_title(markdown_text),
            html=self.render(markdown_text),
        )

    @staticmethod
    def clipboard_payload(markdown_text: str) -> dict[str, str]:
        """Return rich and plain clipboard flavours for *markdown_text*."""
        return {
            "text/html": render_markdown(markdown_text, RenderConfig.preset("clipboard")),
            "text/plain": markdown_text,
        }
