"""
CatalogClient Interface

Abstract interface for the remote photo catalog. Implementations raise
NetworkFailure, RemoteFormatFailure or NotFound; they never write to the
local cache.
"""

from abc import ABC, abstractmethod

from ..models.photo import Photo
from ..models.search_result import SearchPage


class CatalogClient(ABC):
    """Abstract remote catalog"""

    @abstractmethod
    def search(self, query: str, page: int, per_page: int) -> SearchPage:
        """
        Search the catalog.

        Args:
            query: Raw query text
            page: 1-based page number
            per_page: Page size (> 0)

        Returns:
            SearchPage with photos and the next-page link if any

        Raises:
            NetworkFailure: Transport failure or timeout
            RemoteFormatFailure: Response did not match the expected shape
        """
        pass

    @abstractmethod
    def fetch_by_id(self, photo_id: int) -> Photo:
        """
        Fetch a single photo.

        Raises:
            NotFound: Catalog has no such photo
            NetworkFailure: Transport failure or timeout
            RemoteFormatFailure: Response did not match the expected shape
        """
        pass

    def fetch_next_page(self, next_page_url: str) -> SearchPage:
        """Follow a next-page link returned by search()."""
        raise NotImplementedError(f"{type(self).__name__} does not follow next-page links")
