"""Tests for the FastAPI web service."""

from __future__ import annotations

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from md2editor.server import app

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


@pytest.fixture
def client():
    """Create an async test client."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
class TestHealthEndpoint:

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data


@pytest.mark.asyncio
class TestPresetsEndpoint:

    async def test_list_presets(self, client):
        resp = await client.get("/presets")
        assert resp.status_code == 200
        assert resp.json()["presets"] == ["default", "medium", "clipboard"]


@pytest.mark.asyncio
class TestRenderEndpoint:

    async def test_render_text(self, client):
        resp = await client.post("/render", data={"markdown": "# Hello\n\nParagraph."})
        assert resp.status_code == 200
        assert resp.json() == {"title": "Hello", "html": "<h1>Hello</h1><p>Paragraph.</p>"}

    async def test_render_with_preset(self, client):
        resp = await client.post(
            "/render",
            data={"markdown": "# Hello\n\n## Part", "preset": "medium"},
        )
        assert resp.status_code == 200
        assert resp.json()["html"] == "<p><strong>Part</strong></p>"

    async def test_empty_markdown(self, client):
        resp = await client.post("/render", data={"markdown": "   "})
        assert resp.status_code == 400
        assert "empty" in resp.json()["detail"]

    async def test_unknown_preset(self, client):
        resp = await client.post("/render", data={"markdown": "x", "preset": "fancy"})
        assert resp.status_code == 400
        assert "Unknown preset" in resp.json()["detail"]

    async def test_escaping(self, client):
        resp = await client.post("/render", data={"markdown": "<script>x</script>"})
        assert "<script>" not in resp.json()["html"]


@pytest.mark.asyncio
class TestRenderFileEndpoint:

    async def test_upload(self, client):
        resp = await client.post(
            "/render/file",
            files={"file": ("test.md", b"# Hello\n\nWorld", "text/markdown")},
            data={"preset": "medium"},
        )
        assert resp.status_code == 200
        assert resp.json() == {"title": "Hello", "html": "<p>World</p>"}

    async def test_rejected_type(self, client):
        resp = await client.post(
            "/render/file",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
        )
        assert resp.status_code == 415

    async def test_bad_encoding(self, client):
        resp = await client.post(
            "/render/file",
            files={"file": ("a.md", b"\xff\xfe\xfa", "text/markdown")},
        )
        assert resp.status_code == 400

    async def test_sample_fixture(self, client):
        if not SAMPLE_MD.exists():
            pytest.skip("sample.md fixture not found")
        resp = await client.post(
            "/render/file",
            files={"file": ("sample.md", SAMPLE_MD.read_bytes(), "text/markdown")},
        )
        assert resp.status_code == 200
        assert resp.json()["title"] == "Shipping Markdown to the Web"


@pytest.mark.asyncio
class TestClipboardEndpoint:

    async def test_payload(self, client):
        resp = await client.post("/clipboard", data={"markdown": "a\n\nb"})
        assert resp.status_code == 200
        assert resp.json() == {"text/html": "<p>a</p><p><br></p><p>b</p>", "text/plain": "a\n\nb"}

    async def test_empty(self, client):
        resp = await client.post("/clipboard", data={"markdown": ""})
        assert resp.status_code == 400
