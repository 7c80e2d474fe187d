"""md2editor - import Markdown documents into web rich-text editors."""

from __future__ import annotations

__version__ = "0.1.0"

from md2editor.config import PRESETS, RenderConfig
from md2editor.converter import ConversionResult, Converter, render_markdown
from md2editor.errors import (
    EmptyInputError,
    Md2EditorError,
    NoBodyTargetError,
    NoTitleTargetError,
    TargetConflictError,
)
from md2editor.importer import EditorImporter, ImportResult
from md2editor.parser import extract_title
from md2editor.resolver import EditorResolver, Resolution
from md2editor.soup import SoupElement, SoupPage

__all__ = [
    "PRESETS",
    "ConversionResult",
    "Converter",
    "EditorImporter",
    "EditorResolver",
    "EmptyInputError",
    "ImportResult",
    "Md2EditorError",
    "NoBodyTargetError",
    "NoTitleTargetError",
    "RenderConfig",
    "Resolution",
    "SoupElement",
    "SoupPage",
    "TargetConflictError",
    "extract_title",
    "render_markdown",
]
