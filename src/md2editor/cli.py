"""Command-line interface for md2editor.

Usage::

    md2editor input.md                      # writes input.html
    md2editor input.md -o output.html       # explicit output path
    md2editor input.md --preset medium      # use the medium preset
    md2editor input.md --title              # print the extracted title
    md2editor --list-presets                # list available presets
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2editor import __version__
from md2editor.config import PRESETS
from md2editor.converter import Converter
from md2editor.errors import Md2EditorError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2editor",
        description="Convert Markdown files to HTML fragments for rich-text editors.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output HTML file path. Defaults to <input>.html.",
    )
    parser.add_argument(
        "-p", "--preset",
        default="default",
        choices=PRESETS,
        help="Render preset (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--title",
        action="store_true",
        help="Print the extracted title and exit.",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List available render presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.list_presets:
        print("Available presets:")
        for preset in PRESETS:
            print(f"  - {preset}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    output_path = Path(args.output) if args.output else input_path.with_suffix(".html")

    try:
        markdown_text = input_path.read_text(encoding=args.encoding)
        result = Converter(args.preset).convert_text(markdown_text)
    except (Md2EditorError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Conversion of %s failed", input_path, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.title:
        print(result.title)
        return 0

    if args.verbose:
        print(f"Input:  {input_path}")
        print(f"Output: {output_path}")
        print(f"Preset: {args.preset}")
        print(f"Title:  {result.title}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result.html, encoding="utf-8")

    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
