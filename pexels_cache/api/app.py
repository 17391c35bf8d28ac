# pexels_cache/api/app.py - FastAPI application
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..bootstrap import build_repository
from ..core.exceptions import PexelsCacheException, get_status_code
from ..core.logging_config import get_logger
from ..services import PhotoRepository
from ..storage import SQLiteDatabase
from .routers import admin_cache, favorites, photos, recent_searches

logger = get_logger(__name__)


def create_app(repository: PhotoRepository, database: SQLiteDatabase | None = None) -> FastAPI:
    """
    Build the HTTP adapter around an already wired repository

    Args:
        repository: PhotoRepository from the composition root
        database: Handle to close on shutdown, if the app owns it

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if database is not None:
            database.close()

    app = FastAPI(title="pexels-cache", version=__version__, lifespan=lifespan)
    app.state.repository = repository

    @app.exception_handler(PexelsCacheException)
    async def pexels_cache_exception_handler(request: Request, exc: PexelsCacheException):
        """Handle custom pexels-cache exceptions"""
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=get_status_code(exc), content=exc.to_dict())

    app.include_router(photos.router, prefix="/photos", tags=["Photos"])
    app.include_router(favorites.router, prefix="/favorites", tags=["Favorites"])
    app.include_router(recent_searches.router, prefix="/recent-searches", tags=["Recent"])
    app.include_router(admin_cache.router, prefix="/admin/cache", tags=["Admin"])

    @app.get("/stats/health")
    def health_check():
        """Health check endpoint"""
        return JSONResponse(
            {"status": "healthy", "timestamp": datetime.now().isoformat(), "version": __version__}
        )

    return app


def create_default_app() -> FastAPI:
    """App factory for `uvicorn --factory pexels_cache.api.app:create_default_app`"""
    repository, database = build_repository()
    return create_app(repository, database)
