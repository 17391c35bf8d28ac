"""
Value Objects - Immutable domain values

This module contains value objects:
- normalize_query: Cache key of a raw search string
- Result: Tagged success/failure outcome of repository operations
"""

from .query import normalize_query
from .result import Result

__all__ = [
    "Result",
    "normalize_query",
]
