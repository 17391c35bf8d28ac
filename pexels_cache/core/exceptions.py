# pexels_cache/core/exceptions.py - Custom exception hierarchy
from typing import Any


class PexelsCacheException(Exception):  # noqa: N818
    """Base exception for pexels-cache"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses"""
        return {"error": self.__class__.__name__, "message": self.message, "details": self.details}


class CatalogError(PexelsCacheException):  # noqa: N818
    """Remote catalog errors"""

    pass


class NetworkFailure(CatalogError):  # noqa: N818
    """Transport failure or timeout talking to the catalog"""

    pass


class RemoteFormatFailure(CatalogError):  # noqa: N818
    """Catalog response did not match the expected shape"""

    pass


class NotFound(CatalogError):  # noqa: N818
    """Catalog reports no such photo"""

    pass


class StorageFailure(PexelsCacheException):  # noqa: N818
    """Local persistent store errors"""

    pass


class ConfigurationError(PexelsCacheException):  # noqa: N818
    """Configuration errors"""

    pass


# HTTP Status Code mapping
EXCEPTION_STATUS_CODE_MAP = {
    NetworkFailure: 503,
    RemoteFormatFailure: 502,
    NotFound: 404,
    CatalogError: 502,
    StorageFailure: 500,
    ConfigurationError: 500,
    PexelsCacheException: 500,  # Default
}


def get_status_code(exception: PexelsCacheException) -> int:
    """Get HTTP status code for exception"""
    return EXCEPTION_STATUS_CODE_MAP.get(type(exception), 500)
