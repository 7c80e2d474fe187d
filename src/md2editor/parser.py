"""Line-oriented Markdown parser producing a flat block sequence.

The parser is a two-state machine (``Normal`` / ``InCodeBlock``) that
classifies each line of the document and emits :class:`Block` records in
document order.  It never fails: an unterminated code fence is closed at end
of input.  :func:`extract_title` lives here because it must pick the same
leading heading that the parser drops when ``skip_leading_h1`` is set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from md2editor.config import RenderConfig


# ---------------------------------------------------------------------------
# Block definitions
# ---------------------------------------------------------------------------

class BlockType(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "code_block"
    LIST_ITEM = "list_item"
    BLOCKQUOTE = "blockquote"
    THEMATIC_BREAK = "thematic_break"
    BLANK_SEPARATOR = "blank_separator"


@dataclass
class Block:
    type: BlockType
    text: str = ""
    # Heading
    level: int = 0
    # Paragraph / code block
    lines: list[str] = field(default_factory=list)
    # Code block
    language: str = ""
    # List item
    ordered: bool = False


# ---------------------------------------------------------------------------
# Line patterns (matched against the stripped line)
# ---------------------------------------------------------------------------

FENCE = "```"
HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
H1_RE = re.compile(r"^#\s+(.+)$")
THEMATIC_BREAK_RE = re.compile(r"^(?:-{3,}|\*{3,})$")
BLOCKQUOTE_RE = re.compile(r"^>\s?(.*)$")
UNORDERED_ITEM_RE = re.compile(r"^[-*+]\s+(.+)$")
ORDERED_ITEM_RE = re.compile(r"^\d+[.)]\s+(.+)$")

_HEADING_MARKER_RE = re.compile(r"^#{1,6}\s+")
_UNORDERED_MARKER_RE = re.compile(r"^[-*+]\s+")
_ORDERED_MARKER_RE = re.compile(r"^\d+[.)]\s+")

UNTITLED = "Untitled"


def split_lines(text: str) -> list[str]:
    """Split *text* into lines, normalising ``\\r\\n`` and ``\\r`` to ``\\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def extract_title(text: str, fallback: str = UNTITLED) -> str:
    """Derive a display title from the first non-blank line of *text*.

    A leading ``# Heading`` yields its text.  Any other first line is returned
    with one heading, unordered-list and ordered-list marker stripped.
    Returns *fallback* when the document has no non-blank line.
    """
    for line in split_lines(text):
        trimmed = line.strip()
        if not trimmed:
            continue

        h1 = H1_RE.match(trimmed)
        if h1:
            return h1.group(1).strip()

        trimmed = _HEADING_MARKER_RE.sub("", trimmed, count=1)
        trimmed = _UNORDERED_MARKER_RE.sub("", trimmed, count=1)
        trimmed = _ORDERED_MARKER_RE.sub("", trimmed, count=1)
        return trimmed.strip()

    return fallback


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class BlockParser:
    """Parse Markdown text into a list of :class:`Block` records."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()

    # -- public API ---------------------------------------------------------

    def parse(self, text: str) -> list[Block]:
        """Return the blocks of *text* in document order."""
        self._blocks: list[Block] = []
        self._paragraph: list[str] = []
        self._code: Optional[Block] = None
        self._skipped_h1 = False

        for line in split_lines(text):
            self._feed(line)

        self._flush_paragraph()
        if self._code is not None:
            self._blocks.append(self._code)
            self._code = None
        return self._blocks

    # -- line classification ------------------------------------------------

    def _feed(self, line: str) -> None:
        trimmed = line.strip()

        if trimmed.startswith(FENCE):
            self._handle_fence(trimmed)
            return

        if self._code is not None:
            self._code.lines.append(line)
            return

        if not trimmed:
            self._flush_paragraph()
            self._blocks.append(Block(type=BlockType.BLANK_SEPARATOR))
            return

        if self.config.support_media and THEMATIC_BREAK_RE.match(trimmed):
            self._emit(Block(type=BlockType.THEMATIC_BREAK))
            return

        heading = HEADING_RE.match(trimmed)
        if heading:
            self._handle_heading(heading)
            return

        if self.config.support_media:
            quote = BLOCKQUOTE_RE.match(trimmed)
            if quote:
                self._emit(Block(type=BlockType.BLOCKQUOTE, text=quote.group(1)))
                return

        item = UNORDERED_ITEM_RE.match(trimmed)
        if item:
            self._emit(Block(type=BlockType.LIST_ITEM, text=item.group(1)))
            return

        item = ORDERED_ITEM_RE.match(trimmed)
        if item:
            self._emit(Block(type=BlockType.LIST_ITEM, text=item.group(1), ordered=True))
            return

        self._paragraph.append(trimmed)

    # -- handlers -----------------------------------------------------------

    def _handle_fence(self, trimmed: str) -> None:
        if self._code is None:
            self._flush_paragraph()
            self._code = Block(
                type=BlockType.CODE_BLOCK,
                language=trimmed[len(FENCE):].strip(),
            )
        else:
            self._blocks.append(self._code)
            self._code = None

    def _handle_heading(self, match: re.Match) -> None:
        level = len(match.group(1))
        if self.config.skip_leading_h1 and not self._skipped_h1 and level == 1:
            # The title field shows it; only the first H1 is consumed.
            self._skipped_h1 = True
            self._flush_paragraph()
            return
        self._emit(Block(type=BlockType.HEADING, level=level, text=match.group(2).strip()))

    # -- helpers ------------------------------------------------------------

    def _emit(self, block: Block) -> None:
        self._flush_paragraph()
        self._blocks.append(block)

    def _flush_paragraph(self) -> None:
        if self._paragraph:
            self._blocks.append(Block(type=BlockType.PARAGRAPH, lines=self._paragraph))
            self._paragraph = []
