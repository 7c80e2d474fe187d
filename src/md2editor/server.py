"""FastAPI web service for Markdown to editor-HTML conversion.

Endpoints::

    GET  /health        Health check.
    GET  /presets       List available render presets.
    POST /render        Send raw Markdown text, receive title + HTML.
    POST /render/file   Upload a .md file, receive title + HTML.
    POST /clipboard     Send raw Markdown text, receive clipboard flavours.

Run::

    uvicorn md2editor.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from md2editor import __version__
from md2editor.articles import accepts
from md2editor.config import PRESETS
from md2editor.converter import Converter
from md2editor.errors import EmptyInputError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="md2editor",
    description="Markdown to rich-text editor HTML conversion service",
    version=__version__,
)


def _converter(preset: str) -> Converter:
    try:
        return Converter(preset)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _convert(markdown: str, preset: str) -> dict[str, str]:
    converter = _converter(preset)
    try:
        result = converter.convert_text(markdown)
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"title": result.title, "html": result.html}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/presets")
async def list_presets() -> dict[str, list[str]]:
    """List available render presets."""
    return {"presets": PRESETS}


@app.post("/render")
async def render_text(
    markdown: str = Form(""),
    preset: str = Form("default"),
) -> dict[str, str]:
    """Send raw Markdown text and receive its title and HTML body.

    - **markdown**: Markdown source text
    - **preset**: Render preset name
    """
    return _convert(markdown, preset)


@app.post("/render/file")
async def render_file(
    file: UploadFile = File(...),
    preset: str = Form("default"),
    encoding: str = Form("utf-8"),
) -> dict[str, str]:
    """Upload a Markdown file and receive its title and HTML body.

    - **file**: Markdown file (.md, text/markdown or text/plain)
    - **preset**: Render preset name
    - **encoding**: Source file encoding
    """
    filename = file.filename or ""
    if not accepts(filename, file.content_type or ""):
        raise HTTPException(status_code=415, detail=f"Not a Markdown file: {filename!r}")

    raw = await file.read()
    try:
        markdown = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(status_code=400, detail=f"Cannot decode {filename!r}: {exc}") from exc

    logger.info("Rendering upload %r with preset %s", filename, preset)
    return _convert(markdown, preset)


@app.post("/clipboard")
async def clipboard(markdown: str = Form("")) -> dict[str, str]:
    """Return the ``text/html`` and ``text/plain`` clipboard flavours."""
    if not markdown.strip():
        raise HTTPException(status_code=400, detail=str(EmptyInputError()))
    return Converter.clipboard_payload(markdown)
