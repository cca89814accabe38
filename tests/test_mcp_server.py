"""Tests for lazy initialisation of the MCP server's database."""

import pytest

from fonthub import mcp_server
from helpers import SAMPLE_FONTS


@pytest.fixture(autouse=True)
def reset_db(monkeypatch):
    monkeypatch.setattr(mcp_server, "db", None)


def test_initializes_from_environment(monkeypatch, metadata_dir):
    monkeypatch.setenv("FONTHUB_METADATA_DIR", str(metadata_dir))
    db = mcp_server._ensure_initialized()
    assert db.is_loaded
    assert len(db) == len(SAMPLE_FONTS)


def test_initializes_once(monkeypatch, metadata_dir):
    monkeypatch.setenv("FONTHUB_METADATA_DIR", str(metadata_dir))
    first = mcp_server._ensure_initialized()
    assert mcp_server._ensure_initialized() is first


def test_reuses_loaded_database(database):
    mcp_server.db = database
    assert mcp_server._ensure_initialized() is database


def call(tool, **kwargs):
    """Invoke a registered tool's underlying function."""
    return getattr(tool, "fn", tool)(**kwargs)


class TestTools:
    @pytest.fixture(autouse=True)
    def loaded(self, database):
        mcp_server.db = database

    def test_list_fonts(self):
        fonts = call(mcp_server.list_fonts)
        assert {f["name"] for f in fonts} == {d["name"] for d in SAMPLE_FONTS}
        assert "fontsFiles" in fonts[0]

    def test_find_fonts_without_filters_returns_all(self):
        assert len(call(mcp_server.find_fonts)) == len(SAMPLE_FONTS)

    def test_find_fonts_or_within_family(self):
        fonts = call(mcp_server.find_fonts, languages=["zh", "de"])
        assert {f["name"] for f in fonts} == {"Noto Serif SC", "Archivo Narrow"}

    def test_find_fonts_and_across_families(self):
        fonts = call(mcp_server.find_fonts, widths=["condensed"], weights=["bold"])
        assert [f["name"] for f in fonts] == ["Roboto Condensed"]

    def test_find_fonts_each_family_is_mapped(self):
        fonts = call(mcp_server.find_fonts, styles=["italic"], languages=["de"])
        assert [f["name"] for f in fonts] == ["Archivo Narrow"]

    def test_find_fonts_unknown_value(self):
        assert call(mcp_server.find_fonts, weights=["hairline"]) == []

    def test_get_font(self):
        font = call(mcp_server.get_font, name="Lora")
        assert font["languages"] == ["en", "ru"]

    def test_get_font_not_found(self):
        assert call(mcp_server.get_font, name="Comic Sans") == {
            "error": "Font not found: Comic Sans",
        }

    def test_get_fonts_by_category(self):
        fonts = call(mcp_server.get_fonts_by_category, category="serif")
        assert {f["name"] for f in fonts} == {"Noto Serif SC", "Lora"}

    def test_get_library_summary(self):
        summary = call(mcp_server.get_library_summary)
        assert summary["total"] == len(SAMPLE_FONTS)
        assert summary["weights"]["regular"] == 5
