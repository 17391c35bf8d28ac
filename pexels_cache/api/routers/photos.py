"""Photos router - handles /photos/* endpoints"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...services import PhotoRepository
from ..dependencies import get_repository

router = APIRouter()


@router.get("/search")
def search_photos(
    query: str = Query(..., min_length=1, max_length=500),
    page: int = Query(1, ge=1),
    per_page: int | None = Query(None, ge=1, le=80),
    force_refresh: bool = False,
    repository: PhotoRepository = Depends(get_repository),
):
    """Cache-first photo search"""
    result = repository.search_photos(query, page, per_page, force_refresh=force_refresh)
    return JSONResponse(result.get_or_raise().to_dict())


@router.get("/last-search")
def last_search(repository: PhotoRepository = Depends(get_repository)):
    """Cached first page of the most recent search (offline bootstrap)"""
    photos = repository.get_cached_photos_for_last_search()
    return JSONResponse(
        {
            "query": repository.get_last_searched_query(),
            "photos": [photo.to_dict() for photo in photos],
        }
    )


@router.get("/{photo_id}")
def get_photo(photo_id: int, repository: PhotoRepository = Depends(get_repository)):
    """Photo details, cache first"""
    photo = repository.get_photo_by_id(photo_id).get_or_raise()
    data = photo.to_dict()
    data["is_favorite"] = repository.is_favorite(photo_id)
    return JSONResponse(data)
