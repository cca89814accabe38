"""
FastMCP Server for FontHub

Exposes the font index as MCP tools so an assistant can list and select
fonts by width, weight, style and language.

Run over stdio:
  python -m fonthub.mcp_server

Run over HTTP (SSE):
  python -m fonthub.mcp_server --transport sse [--host 127.0.0.1] [--port 8000]
"""

from typing import Any, Dict, List, Optional

from fastmcp import FastMCP
from loguru import logger

from .config import Settings, configure_logging
from .database import FontDatabase
from .models import FontSelector

# ---------------------------------------------------------------------------
# Global state
# ---------------------------------------------------------------------------

mcp = FastMCP("FontHub")

db: Optional[FontDatabase] = None


def _ensure_initialized() -> FontDatabase:
    """Load the font database on first tool call."""
    global db
    if db is not None and db.is_loaded:
        return db

    settings = Settings.from_env()
    logger.info(f"Initializing FontHub MCP server from {settings.metadata_dir}...")
    database = FontDatabase(settings.metadata_dir, strict=settings.strict_load)
    database.load()
    db = database
    logger.info(f"MCP server ready with {len(db)} fonts")
    return db


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

@mcp.tool()
def list_fonts() -> List[Dict[str, Any]]:
    """
    List every font in the metadata set.

    Returns:
        All font records (name, license, version, categories, widths, weights,
        styles, languages, source, fontsFiles).
    """
    database = _ensure_initialized()
    return [f.to_dict() for f in database.get_all()]


@mcp.tool()
def find_fonts(
    widths: Optional[List[str]] = None,
    weights: Optional[List[str]] = None,
    styles: Optional[List[str]] = None,
    languages: Optional[List[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Find fonts by attribute values.

    A font matches a family when it has any of the listed values; it must
    match every family that is given. Values are exact and case-sensitive.

    Args:
        widths: e.g. ["condensed", "normal"]. Optional.
        weights: e.g. ["bold"]. Optional.
        styles: e.g. ["italic"]. Optional.
        languages: e.g. ["en", "zh"]. Optional.

    Returns:
        Matching font records. No filters returns every font.
    """
    database = _ensure_initialized()
    selector = FontSelector(
        widths=widths or [],
        weights=weights or [],
        styles=styles or [],
        languages=languages or [],
    )
    logger.info(f"selector: {selector}")
    return [f.to_dict() for f in database.get_by_selector(selector)]


@mcp.tool()
def get_font(name: str) -> Dict[str, Any]:
    """
    Get a single font by its exact name.

    Returns:
        The font record, or {"error": ...} when no font has that name.
    """
    database = _ensure_initialized()
    font = database.get_by_name(name)
    if font is None:
        return {"error": f"Font not found: {name}"}
    return font.to_dict()


@mcp.tool()
def get_fonts_by_category(category: str) -> List[Dict[str, Any]]:
    """List fonts tagged with ``category`` (exact match)."""
    database = _ensure_initialized()
    return [f.to_dict() for f in database.get_by_category(category)]


@mcp.tool()
def get_library_summary() -> Dict[str, Any]:
    """
    Summary of the loaded metadata set.

    Returns:
        Font total plus counts per width, weight, style, language, category
        and license.
    """
    database = _ensure_initialized()
    return database.get_summary()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    """Run the MCP server."""
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--transport", default="stdio", choices=["stdio", "sse"])
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    configure_logging(Settings.from_env().log_level)
    logger.info("Starting FontHub MCP Server...")

    if args.transport == "sse":
        mcp.run(transport="sse", host=args.host, port=args.port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
