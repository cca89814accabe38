"""
FastAPI Web Application for FontHub

Endpoints:
  GET  /                               - Serve the font browser page
  GET  /static/...                     - Static assets
  GET  /api/fonts                      - All fonts
  GET  /api/fonts/selector             - Fonts matching width/weight/style/language
  GET  /api/fonts/category/{category}  - Fonts in a category
  GET  /api/fonts/{name}               - A single font by name (may contain "/")
  GET  /api/font?name=...              - A single font by name, any name
  GET  /api/stats                      - Library statistics
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from .config import Settings, configure_logging
from .database import FontDatabase
from .models import FontMetadata, FontSelector

STATIC_DIR = Path(__file__).parent / "static"


def _envelope(data) -> JSONResponse:
    return JSONResponse({"success": True, "data": data})


def _dump(fonts: List[FontMetadata]) -> list:
    return [f.to_dict() for f in fonts]


def create_app(
    database: Optional[FontDatabase] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application around a ``FontDatabase``.

    When the database has not been loaded yet it is loaded during startup,
    before any request is served.
    """
    settings = settings or Settings.from_env()
    db = database or FontDatabase(settings.metadata_dir, strict=settings.strict_load)

    @asynccontextmanager
    async def lifespan(app_instance: FastAPI):
        if not db.is_loaded:
            configure_logging(settings.log_level)
            db.load()
        logger.info(f"FontHub ready. {len(db)} fonts loaded.")
        yield

    app_instance = FastAPI(title="FontHub", lifespan=lifespan)
    app_instance.state.db = db
    app_instance.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    def _font_response(name: str) -> JSONResponse:
        font = db.get_by_name(name)
        if font is None:
            raise HTTPException(status_code=404, detail="Font not found")
        return _envelope(font.to_dict())

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------

    @app_instance.get("/")
    async def index():
        return FileResponse(STATIC_DIR / "index.html")

    @app_instance.get("/api/fonts")
    async def get_fonts():
        """All loaded fonts."""
        return _envelope(_dump(db.get_all()))

    @app_instance.get("/api/fonts/selector")
    async def get_fonts_by_selector(
        width: Optional[List[str]] = Query(None),
        weight: Optional[List[str]] = Query(None),
        style: Optional[List[str]] = Query(None),
        language: Optional[List[str]] = Query(None),
    ):
        """Fonts matching any listed value per family, across all given families."""
        selector = FontSelector(
            widths=width or [],
            weights=weight or [],
            styles=style or [],
            languages=language or [],
        )
        logger.info(f"selector: {selector}")
        return _envelope(_dump(db.get_by_selector(selector)))

    @app_instance.get("/api/fonts/category/{category}")
    async def get_fonts_by_category(category: str):
        return _envelope(_dump(db.get_by_category(category)))

    @app_instance.get("/api/font")
    async def get_font_by_query(name: str = Query(...)):
        """Lookup by ``?name=``; reaches names that the path routes shadow."""
        return _font_response(name)

    # Names may contain "/". "selector" and "category/..." resolve to the
    # routes above instead; use /api/font?name=... for those.
    @app_instance.get("/api/fonts/{name:path}")
    async def get_font(name: str):
        return _font_response(name)

    @app_instance.get("/api/stats")
    async def library_stats():
        """Library summary stats."""
        return JSONResponse(db.get_summary())

    return app_instance


app = create_app()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info(f"Starting FontHub on {settings.host}:{settings.port}")
    uvicorn.run(
        "fonthub.app:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
