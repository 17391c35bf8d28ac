"""
Query normalization

Maps raw search text onto the cache key shared by the photo cache and the
recent-search list.
"""


def normalize_query(text: str) -> str:
    """
    Canonical cache key for a search string.

    Trims surrounding whitespace and lower-cases, so "Nature", "nature" and
    " Nature " share one cache partition and one recency entry. Idempotent.
    """
    return text.strip().lower()
