"""Recent searches router - handles /recent-searches/* endpoints"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ...services import PhotoRepository
from ..dependencies import get_repository

router = APIRouter()


@router.get("")
def recent_searches(
    limit: int = Query(10, ge=1, le=100),
    repository: PhotoRepository = Depends(get_repository),
):
    """Recent normalized queries, newest first"""
    return JSONResponse({"queries": repository.recent_queries(limit).snapshot()})


@router.delete("/{query}")
def delete_recent_search(query: str, repository: PhotoRepository = Depends(get_repository)):
    repository.delete_recent_query(query)
    return JSONResponse({"success": True})


@router.delete("")
def clear_recent_searches(repository: PhotoRepository = Depends(get_repository)):
    repository.clear_recent_queries()
    return JSONResponse({"success": True})
