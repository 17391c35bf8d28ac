# pexels_cache/api/models.py - Pydantic models for request validation
import re

from pydantic import BaseModel, Field, validator


class RefreshCacheRequest(BaseModel):
    """Cache refresh request model"""

    query: str = Field(..., min_length=1, max_length=500, description="Query whose cache is dropped")
    include_favorites: bool = Field(False, description="Also drop favorite photos of that query")

    @validator("query")
    def sanitize_query(cls, v):  # noqa: N805
        """Strip HTML tags"""
        return re.sub(r"<[^>]+>", "", v).strip()

    class Config:
        json_schema_extra = {"example": {"query": "Nature", "include_favorites": False}}


class FavoriteUpdateRequest(BaseModel):
    """Favorite flag update request model"""

    is_favorite: bool = Field(..., description="New favorite flag")

    class Config:
        json_schema_extra = {"example": {"is_favorite": True}}
