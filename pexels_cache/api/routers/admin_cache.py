"""Admin Cache router - handles /admin/cache/* endpoints"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...services import PhotoRepository
from ..dependencies import get_repository
from ..models import RefreshCacheRequest

router = APIRouter()


@router.post("/clear")
def clear_cache(repository: PhotoRepository = Depends(get_repository)):
    """Clear every cached photo except favorites (admin endpoint)"""
    deleted = repository.clear_cache()
    return JSONResponse({"success": True, "deleted": deleted, "message": "Cache cleared"})


@router.post("/refresh")
def refresh_cache(body: RefreshCacheRequest, repository: PhotoRepository = Depends(get_repository)):
    """Invalidate one query so its next search refetches (admin endpoint)"""
    deleted = repository.refresh_cache(body.query, include_favorites=body.include_favorites)
    return JSONResponse({"success": True, "deleted": deleted})


@router.get("/stats")
def cache_stats(repository: PhotoRepository = Depends(get_repository)):
    return JSONResponse(repository.get_stats())
