"""Integration tests for the Converter orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from md2editor import extract_title, render_markdown
from md2editor.config import PRESETS, RenderConfig
from md2editor.converter import ConversionResult, Converter
from md2editor.errors import EmptyInputError

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_MD = FIXTURE_DIR / "sample.md"


class TestConverterInit:
    """Test Converter construction."""

    def test_default_preset(self):
        c = Converter()
        assert c.preset == "default"
        assert c.config == RenderConfig()

    def test_custom_preset(self):
        c = Converter("medium")
        assert c.config.skip_leading_h1
        assert c.config.heading_style == "inline_bold"

    def test_invalid_preset_raises(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            Converter("nonexistent")

    def test_all_presets_valid(self):
        for preset in PRESETS:
            assert Converter(preset).config == RenderConfig.preset(preset)

    def test_explicit_config(self):
        config = RenderConfig(support_media=False)
        assert Converter(config=config).config is config


class TestRenderConfig:
    def test_invalid_heading_style(self):
        with pytest.raises(ValueError, match="heading style"):
            RenderConfig(heading_style="fancy")

    def test_derive(self):
        base = RenderConfig.preset("medium")
        derived = base.derive(heading_style="structural")
        assert derived.skip_leading_h1
        assert derived.heading_style == "structural"
        assert base.heading_style == "inline_bold"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            RenderConfig().support_media = False


class TestConvertText:
    """Test convert_text produces a title and body."""

    def test_title_and_body(self):
        result = Converter("medium").convert_text("# Foo\n\nBar")
        assert result == ConversionResult(title="Foo", html="<p>Bar</p>")

    def test_default_keeps_heading(self):
        result = Converter().convert_text("# Foo\n\nBar")
        assert result.html == "<h1>Foo</h1><p>Bar</p>"

    def test_title_from_list_item(self):
        result = Converter().convert_text("- just a list")
        assert result.title == "just a list"

    @pytest.mark.parametrize("md", ["", "   ", "\n\n\t"])
    def test_empty_input(self, md):
        with pytest.raises(EmptyInputError):
            Converter().convert_text(md)

    def test_empty_input_is_value_error(self):
        with pytest.raises(ValueError):
            Converter().convert_text("")

    def test_sample_fixture(self):
        if not SAMPLE_MD.exists():
            pytest.skip("sample.md fixture not found")
        result = Converter("medium").convert_text(SAMPLE_MD.read_text(encoding="utf-8"))
        assert result.title == "Shipping Markdown to the Web"
        assert result.html.startswith("<p>Writing in plain text keeps drafts portable. Every editor")


class TestModuleFunctions:
    def test_render_markdown_default(self):
        assert render_markdown("*x*") == "<p><em>x</em></p>"

    def test_extract_title(self):
        assert extract_title("\n# Foo") == "Foo"
        assert extract_title("") == "Untitled"

    def test_render_empty(self):
        assert render_markdown("") == ""


class TestClipboardPayload:
    def test_flavours(self):
        payload = Converter.clipboard_payload("# T\n\nA ![i](p.png)")
        assert payload["text/plain"] == "# T\n\nA ![i](p.png)"
        assert payload["text/html"] == "<h1>T</h1><p><br></p><p>A ![i](p.png)</p>"
