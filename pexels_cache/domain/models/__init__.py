"""
Domain Models - Core business entities

This module contains the main business entities:
- Photo / PhotoSrc: Catalog records as fetched from the remote catalog
- CachedPhoto: Persistent copy of a photo with favorite and freshness state
- SearchPage: One page of remote search results
- SearchResult: What a search hands back to callers
- RecentQuery: A remembered search term
"""

from .photo import DETAIL_PAGE_INDEX, DETAIL_QUERY_KEY, CachedPhoto, Photo, PhotoSrc
from .recent_query import RecentQuery
from .search_result import SearchPage, SearchResult

__all__ = [
    "Photo",
    "PhotoSrc",
    "CachedPhoto",
    "SearchPage",
    "SearchResult",
    "RecentQuery",
    "DETAIL_QUERY_KEY",
    "DETAIL_PAGE_INDEX",
]
