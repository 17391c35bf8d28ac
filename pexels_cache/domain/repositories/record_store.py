"""
RecordStore Interface

Abstract interface for the persistent photo cache following the Repository
Pattern. Implementations must apply batch writes atomically and report every
backend error as StorageFailure.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models.photo import CachedPhoto


class RecordStore(ABC):
    """
    Abstract repository interface for cached photo records.

    A photo id has at most one row; writes replace every field of that row.
    """

    @abstractmethod
    def upsert_many(self, records: Sequence[CachedPhoto]) -> None:
        """
        Insert or replace records by id in one transaction.

        Args:
            records: Rows to write

        Raises:
            StorageFailure: If the batch could not be written (nothing is applied)
        """
        pass

    @abstractmethod
    def upsert_one(self, record: CachedPhoto) -> None:
        """Insert or replace a single record by id."""
        pass

    @abstractmethod
    def get_by_query_and_page(self, query_key: str, page: int) -> list[CachedPhoto]:
        """
        Get records cached under a query key and page.

        Returns:
            Records ordered by page then id ascending
        """
        pass

    @abstractmethod
    def get_by_query(self, query_key: str) -> list[CachedPhoto]:
        """Get every record cached under a query key, ordered by page then id."""
        pass

    @abstractmethod
    def get_by_id(self, photo_id: int) -> CachedPhoto | None:
        """Get a record by photo id, None if absent."""
        pass

    @abstractmethod
    def count_for_query(self, query_key: str) -> int:
        """Number of records cached under a query key."""
        pass

    @abstractmethod
    def count_all(self) -> int:
        pass

    @abstractmethod
    def count_favorites(self) -> int:
        pass

    @abstractmethod
    def set_favorite(self, photo_id: int, value: bool) -> None:
        """Set the favorite flag of a record (no-op if absent)."""
        pass

    @abstractmethod
    def is_favorite(self, photo_id: int) -> bool | None:
        """Favorite flag of a record, None if the record is absent."""
        pass

    @abstractmethod
    def list_favorites(self) -> list[CachedPhoto]:
        """Favorite records, most recently updated first."""
        pass

    @abstractmethod
    def delete_older_than(self, query_key: str, cutoff: int) -> int:
        """
        Delete non-favorite records of a query key updated before cutoff.

        Args:
            query_key: Normalized query key
            cutoff: Epoch milliseconds; rows with updated_at < cutoff are removed

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    def delete_all_for_query(self, query_key: str, include_favorites: bool = False) -> int:
        """Delete records of a query key, favorites only when requested."""
        pass

    @abstractmethod
    def clear_non_favorites(self) -> int:
        """Delete every non-favorite record."""
        pass

    @abstractmethod
    def delete_everything(self) -> int:
        """Delete every record, favorites included."""
        pass
