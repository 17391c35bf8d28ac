"""
Domain Layer - Business logic and domain models

This layer contains:
- Domain models: Core business entities
- Repositories: Abstract interfaces for data access
- Value objects: Immutable domain values

Following Clean Architecture principles:
- Independent of frameworks and external libraries
- Independent of infrastructure (SQLite, HTTP, etc.)
- Testable without external dependencies
"""

from .models import (
    DETAIL_PAGE_INDEX,
    DETAIL_QUERY_KEY,
    CachedPhoto,
    Photo,
    PhotoSrc,
    RecentQuery,
    SearchPage,
    SearchResult,
)
from .repositories import CatalogClient, RecentQueryStore, RecordStore
from .value_objects import Result, normalize_query

__all__ = [
    "Photo",
    "PhotoSrc",
    "CachedPhoto",
    "SearchPage",
    "SearchResult",
    "RecentQuery",
    "DETAIL_QUERY_KEY",
    "DETAIL_PAGE_INDEX",
    "Result",
    "normalize_query",
    "CatalogClient",
    "RecordStore",
    "RecentQueryStore",
]
