"""
Storage layer - SQLite implementations of the repository interfaces

- SQLiteDatabase: Explicitly constructed database handle (schema, transactions,
  change notifications)
- SQLiteRecordStore: RecordStore over the photos table
- SQLiteRecentQueryStore: RecentQueryStore over the recent_searches table
"""

from .sqlite_store import (
    PHOTOS_TABLE,
    RECENT_SEARCHES_TABLE,
    SQLiteDatabase,
    SQLiteRecentQueryStore,
    SQLiteRecordStore,
)

__all__ = [
    "SQLiteDatabase",
    "SQLiteRecordStore",
    "SQLiteRecentQueryStore",
    "PHOTOS_TABLE",
    "RECENT_SEARCHES_TABLE",
]
