"""
pexels-cache - Cache-first access to the Pexels photo catalog

Serves paginated search results and photo details from a local SQLite cache,
falls back to stale data when the catalog is unreachable, and keeps user
favorites and a bounded list of recent searches.
"""

__version__ = "0.1.0"
