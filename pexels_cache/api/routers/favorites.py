"""Favorites router - handles /favorites/* endpoints"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...services import PhotoRepository
from ..dependencies import get_repository
from ..models import FavoriteUpdateRequest

router = APIRouter()


@router.get("")
def list_favorites(repository: PhotoRepository = Depends(get_repository)):
    """Current favorites, most recently updated first"""
    photos = repository.list_favorites().snapshot()
    return JSONResponse({"photos": [photo.to_dict() for photo in photos], "count": len(photos)})


@router.get("/{photo_id}")
def is_favorite(photo_id: int, repository: PhotoRepository = Depends(get_repository)):
    return JSONResponse({"photo_id": photo_id, "is_favorite": repository.is_favorite(photo_id)})


@router.post("/{photo_id}/toggle")
def toggle_favorite(photo_id: int, repository: PhotoRepository = Depends(get_repository)):
    is_favorite = repository.toggle_favorite(photo_id)
    return JSONResponse({"photo_id": photo_id, "is_favorite": is_favorite})


@router.put("/{photo_id}")
def set_favorite(
    photo_id: int,
    body: FavoriteUpdateRequest,
    repository: PhotoRepository = Depends(get_repository),
):
    repository.set_favorite(photo_id, body.is_favorite)
    return JSONResponse({"photo_id": photo_id, "is_favorite": body.is_favorite})
