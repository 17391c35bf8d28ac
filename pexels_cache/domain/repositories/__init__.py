"""
Repository Interfaces - Abstract data access contracts

This module contains repository interfaces following the Repository Pattern:
- RecordStore: Persistent cache of photo records
- RecentQueryStore: Bounded recency list of search terms
- CatalogClient: Remote photo catalog

These interfaces define contracts that infrastructure layer must implement,
ensuring the domain layer remains independent of specific technologies.
"""

from .catalog_client import CatalogClient
from .recent_query_store import RecentQueryStore
from .record_store import RecordStore

__all__ = [
    "CatalogClient",
    "RecordStore",
    "RecentQueryStore",
]
