"""
SearchResult Domain Models

SearchPage is one page as answered by the remote catalog; SearchResult is
what the repository hands back to callers.
"""

from dataclasses import dataclass, field

from .photo import Photo


@dataclass(frozen=True)
class SearchPage:
    """One page of remote search results"""

    photos: list[Photo] = field(default_factory=list)
    next_page: str | None = None

    @property
    def has_more(self) -> bool:
        """A next-page link means the catalog has more pages"""
        return self.next_page is not None


@dataclass(frozen=True)
class SearchResult:
    """
    Search result returned to callers.

    Contains:
    - Photos in page order
    - Whether a further page is known to exist
    - Whether the photos came from the local cache
    """

    photos: list[Photo]
    has_next_page: bool
    from_cache: bool

    def count(self) -> int:
        """Get number of photos in results."""
        return len(self.photos)

    def to_dict(self) -> dict:
        """
        Convert search result to dictionary format for API responses.

        Returns:
            Dictionary with search result data
        """
        return {
            "photos": [photo.to_dict() for photo in self.photos],
            "has_next_page": self.has_next_page,
            "from_cache": self.from_cache,
            "result_count": self.count(),
        }
