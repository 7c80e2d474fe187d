"""Render configuration and named presets.

A :class:`RenderConfig` selects how the single render engine behaves for a
given destination.  Presets map a short name to a ready-made configuration,
the same way the CLI and web service refer to them::

    config = RenderConfig.preset("medium")
    config = RenderConfig(heading_style="inline_bold")
"""

from __future__ import annotations

from dataclasses import dataclass, replace


HEADING_STYLES = ("structural", "inline_bold")


@dataclass(frozen=True)
class RenderConfig:
    """Options recognised by the block parser, renderer and inline formatter."""

    # Drop the leading level-1 heading; the destination has its own title field.
    skip_leading_h1: bool = False
    # "structural" emits <h1>..<h6>; "inline_bold" emits a bold paragraph.
    heading_style: str = "structural"
    # Images, links with titles, blockquotes and horizontal rules.
    support_media: bool = True
    # Render interior blank lines as empty paragraphs.
    preserve_blank_lines: bool = False

    def __post_init__(self) -> None:
        if self.heading_style not in HEADING_STYLES:
            raise ValueError(
                f"Unknown heading style {self.heading_style!r}. "
                f"Choose from: {', '.join(HEADING_STYLES)}"
            )

    def derive(self, **overrides) -> RenderConfig:
        """Return a copy with selected fields overridden."""
        return replace(self, **overrides)

    @classmethod
    def preset(cls, name: str) -> RenderConfig:
        """Return the configuration registered under *name*."""
        if name not in _PRESETS:
            raise ValueError(
                f"Unknown preset {name!r}. Choose from: {', '.join(_PRESETS)}"
            )
        return _PRESETS[name]


# ---------------------------------------------------------------------------
# Preset registry
# ---------------------------------------------------------------------------

_PRESETS: dict[str, RenderConfig] = {
    "default": RenderConfig(),
    "medium": RenderConfig(skip_leading_h1=True, heading_style="inline_bold"),
    "clipboard": RenderConfig(support_media=False, preserve_blank_lines=True),
}

PRESETS = list(_PRESETS.keys())
