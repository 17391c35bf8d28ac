"""
Photo Domain Models

Catalog records as returned by the remote catalog, and their cached form
carrying local bookkeeping (query partition, page, favorite flag, timestamp).
"""

from dataclasses import dataclass
from typing import Any

from ...core.exceptions import RemoteFormatFailure

DETAIL_QUERY_KEY = "detail"
DETAIL_PAGE_INDEX = 0


def _require(payload: dict, key: str, kind: type) -> Any:
    value = payload.get(key)
    # bool is an int subclass; a flag where a dimension belongs is still malformed
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise RemoteFormatFailure(
            f"Field '{key}' missing or not {kind.__name__}",
            details={"field": key, "value": repr(value)},
        )
    return value


@dataclass(frozen=True)
class PhotoSrc:
    """Image variant URLs of a photo"""

    original: str
    large: str
    medium: str
    small: str

    @classmethod
    def from_dict(cls, payload: Any) -> "PhotoSrc":
        if not isinstance(payload, dict):
            raise RemoteFormatFailure("Field 'src' missing or not an object")
        return cls(
            original=_require(payload, "original", str),
            large=_require(payload, "large", str),
            medium=_require(payload, "medium", str),
            small=_require(payload, "small", str),
        )

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "large": self.large,
            "medium": self.medium,
            "small": self.small,
        }


@dataclass(frozen=True)
class Photo:
    """
    Photo domain model representing one catalog record.

    Immutable once fetched from the remote catalog.
    """

    id: int
    width: int
    height: int
    photographer: str
    url: str
    src: PhotoSrc

    def to_dict(self) -> dict:
        """
        Convert photo to dictionary format for API responses.

        Returns:
            Dictionary in the catalog's JSON shape
        """
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "photographer": self.photographer,
            "url": self.url,
            "src": self.src.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "Photo":
        """
        Parse a photo from the catalog's JSON shape.

        Extra fields are ignored.

        Raises:
            RemoteFormatFailure: If a required field is missing or ill-typed
        """
        if not isinstance(payload, dict):
            raise RemoteFormatFailure("Photo payload is not an object")
        return cls(
            id=_require(payload, "id", int),
            width=_require(payload, "width", int),
            height=_require(payload, "height", int),
            photographer=_require(payload, "photographer", str),
            url=_require(payload, "url", str),
            src=PhotoSrc.from_dict(payload.get("src")),
        )

    def to_cached(
        self,
        query_key: str,
        page_index: int,
        is_favorite: bool,
        updated_at: int,
    ) -> "CachedPhoto":
        """Build the row persisted for this photo"""
        return CachedPhoto(
            photo=self,
            query_key=query_key,
            page_index=page_index,
            is_favorite=is_favorite,
            updated_at=updated_at,
        )


@dataclass(frozen=True)
class CachedPhoto:
    """
    Cached copy of a photo.

    There is at most one row per photo id; query_key/page_index record where
    the latest copy was discovered ("detail"/0 for direct lookups).
    """

    photo: Photo
    query_key: str
    page_index: int
    is_favorite: bool = False
    updated_at: int = 0
