"""HTML renderer - converts a block sequence to a contenteditable fragment.

This module turns the flat :class:`~md2editor.parser.Block` list produced by
:mod:`md2editor.parser` into a single HTML string.  Block elements are
self-delimiting, so fragments are concatenated with no separator.  The
renderer groups consecutive list items of the same kind into one ``<ul>`` or
``<ol>`` container.
"""

from __future__ import annotations

import html
import re
from typing import Optional

from md2editor.config import RenderConfig
from md2editor.inline import escape_html, format_inline
from md2editor.parser import Block, BlockType

EMPTY_PARAGRAPH = "<p><br></p>"


# ---------------------------------------------------------------------------
# Plain-text fallback
# ---------------------------------------------------------------------------

_PARA_BREAK_RE = re.compile(r"</p>\s*<p>")
_LI_OPEN_RE = re.compile(r"<li>")
_LI_CLOSE_RE = re.compile(r"</li>")
_BR_RE = re.compile(r"<br\s*/?>")
_TAG_RE = re.compile(r"<[^>]+>")


def html_to_text(fragment: str) -> str:
    """Flatten a rendered fragment to plain text.

    Used when a destination refuses HTML insertion: paragraphs become blank
    line separated, list items become ``- `` lines, ``<br>`` becomes a
    newline and every other tag is dropped.
    """
    text = _PARA_BREAK_RE.sub("\n\n", fragment)
    text = _LI_OPEN_RE.sub("- ", text)
    text = _LI_CLOSE_RE.sub("\n", text)
    text = _BR_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    return html.unescape(text).strip()


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class HtmlRenderer:
    """Render :class:`Block` sequences to an HTML fragment."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()

    def render(self, blocks: list[Block]) -> str:
        """Return the HTML fragment for *blocks*."""
        parts: list[str] = []
        open_list: Optional[str] = None

        for block in self._trim_separators(blocks):
            if block.type == BlockType.LIST_ITEM:
                tag = "ol" if block.ordered else "ul"
                if open_list != tag:
                    if open_list:
                        parts.append(f"</{open_list}>")
                    parts.append(f"<{tag}>")
                    open_list = tag
                parts.append(self._render_list_item(block))
                continue

            if open_list:
                parts.append(f"</{open_list}>")
                open_list = None
            parts.append(self._render_block(block))

        if open_list:
            parts.append(f"</{open_list}>")
        return "".join(parts)

    # -- dispatch -----------------------------------------------------------

    def _render_block(self, block: Block) -> str:
        handler = getattr(self, f"_render_{block.type.value}")
        return handler(block)

    def _inline(self, text: str) -> str:
        return format_inline(text, support_media=self.config.support_media)

    # -- block renderers ----------------------------------------------------

    def _render_heading(self, block: Block) -> str:
        content = self._inline(block.text)
        if self.config.heading_style == "inline_bold":
            # Bold paragraph keeps imported text easy to edit downstream.
            return f"<p><strong>{content}</strong></p>"
        return f"<h{block.level}>{content}</h{block.level}>"

    def _render_paragraph(self, block: Block) -> str:
        return f"<p>{self._inline(' '.join(block.lines).strip())}</p>"

    def _render_code_block(self, block: Block) -> str:
        class_attr = ""
        if block.language:
            class_attr = f' class="language-{escape_html(block.language)}"'
        body = "".join(f"{escape_html(line)}\n" for line in block.lines)
        return f"<pre><code{class_attr}>{body}</code></pre>"

    def _render_list_item(self, block: Block) -> str:
        return f"<li>{self._inline(block.text)}</li>"

    def _render_blockquote(self, block: Block) -> str:
        return f"<blockquote><p>{self._inline(block.text)}</p></blockquote>"

    def _render_thematic_break(self, _block: Block) -> str:
        return "<hr />"

    def _render_blank_separator(self, _block: Block) -> str:
        return EMPTY_PARAGRAPH if self.config.preserve_blank_lines else ""

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _trim_separators(blocks: list[Block]) -> list[Block]:
        """Drop leading and trailing blank separators."""
        start, end = 0, len(blocks)
        while start < end and blocks[start].type == BlockType.BLANK_SEPARATOR:
            start += 1
        while end > start and blocks[end - 1].type == BlockType.BLANK_SEPARATOR:
            end -= 1
        return blocks[start:end]
