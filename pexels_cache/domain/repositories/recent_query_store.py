"""
RecentQueryStore Interface

Abstract interface for the bounded most-recently-used list of search terms.
"""

from abc import ABC, abstractmethod

from ..models.recent_query import RecentQuery


class RecentQueryStore(ABC):
    """Abstract repository interface for recent search terms"""

    @abstractmethod
    def touch(self, query_key: str, timestamp: int) -> None:
        """
        Insert a query or update its last-used time.

        Empty keys are ignored.
        """
        pass

    @abstractmethod
    def most_recent(self, limit: int) -> list[RecentQuery]:
        """Up to limit queries, most recently used first."""
        pass

    @abstractmethod
    def delete(self, query_key: str) -> None:
        pass

    @abstractmethod
    def clear_all(self) -> None:
        pass

    @abstractmethod
    def retain_only(self, limit: int) -> int:
        """
        Delete every query not among the limit most recently used.

        Must run after every touch so the bound holds.

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    def count(self) -> int:
        pass
