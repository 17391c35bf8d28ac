"""
Photo Repository - Cache-first access to the photo catalog

Strategy:
1. Serve from the local cache when possible
2. On a miss or forced refresh, ask the remote catalog
3. Persist fetched photos, keeping any favorite flag already recorded
4. On remote failure, fall back to whatever the cache holds for that page
"""

import time
from collections.abc import Callable

from ..core.config import RepositoryConfig
from ..core.exceptions import (
    CatalogError,
    NetworkFailure,
    PexelsCacheException,
    RemoteFormatFailure,
    StorageFailure,
)
from ..core.logging_config import get_logger, log_with_context
from ..core.observable import ChangeNotifier, LiveQuery
from ..domain.models import (
    DETAIL_PAGE_INDEX,
    DETAIL_QUERY_KEY,
    Photo,
    SearchPage,
    SearchResult,
)
from ..domain.repositories import CatalogClient, RecentQueryStore, RecordStore
from ..domain.value_objects import Result, normalize_query
from ..storage import PHOTOS_TABLE, RECENT_SEARCHES_TABLE

logger = get_logger(__name__)


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def _as_catalog_error(error: Exception) -> CatalogError:
    """Map stray transport/parse errors from a CatalogClient onto the taxonomy"""
    if isinstance(error, CatalogError):
        return error
    if isinstance(error, OSError):
        return NetworkFailure(str(error) or type(error).__name__)
    return RemoteFormatFailure(str(error) or type(error).__name__)


class PhotoRepository:
    """
    Cache-first repository for catalog photos.

    Every public operation is independent and safe to call from several
    threads; atomicity comes from the stores, not from locks held here.
    Concurrent toggles of the same photo are last-writer-wins.
    """

    def __init__(
        self,
        record_store: RecordStore,
        recent_store: RecentQueryStore,
        catalog: CatalogClient,
        notifier: ChangeNotifier,
        config: RepositoryConfig | None = None,
        clock: Callable[[], int] = current_millis,
    ):
        """
        Initialize repository with its collaborators

        Args:
            record_store: Persistent photo cache
            recent_store: Recent search terms
            catalog: Remote catalog client
            notifier: Change notifier the stores publish to; live queries wait on it
            config: Cache age, recency bound and page size
            clock: Epoch-milliseconds clock
        """
        self.record_store = record_store
        self.recent_store = recent_store
        self.catalog = catalog
        self.notifier = notifier
        self.config = config or RepositoryConfig()
        self.clock = clock

    # ==================== Search ====================

    def search_photos(
        self,
        query: str,
        page: int = 1,
        per_page: int | None = None,
        force_refresh: bool = False,
    ) -> Result[SearchResult]:
        """
        Search photos, cache first.

        Args:
            query: Raw search text; sent to the catalog as-is
            page: 1-based page number
            per_page: Page size (defaults to config)
            force_refresh: Skip the cache read and go to the catalog

        Returns:
            Result with a SearchResult, or the catalog error when neither the
            catalog nor the cache could answer
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if per_page is None:
            per_page = self.config.default_per_page
        if per_page < 1:
            raise ValueError("per_page must be > 0")
        query_key = normalize_query(query)

        self._remember_query(query_key)

        if not force_refresh:
            try:
                cached = self.record_store.get_by_query_and_page(query_key, page)
            except StorageFailure as e:
                return Result.failure(e)
            if cached:
                log_with_context(
                    logger, "debug", "Cache hit", query_key=query_key, page=page, count=len(cached)
                )
                # Cached pages do not record the catalog's pagination state
                return Result.success(
                    SearchResult(
                        photos=[record.photo for record in cached],
                        has_next_page=True,
                        from_cache=True,
                    )
                )

        log_with_context(logger, "debug", "Network fetch", query_key=query_key, page=page)
        try:
            response = self.catalog.search(query, page, per_page)
        except Exception as e:
            return self._fallback_to_cache(query_key, page, _as_catalog_error(e))

        now = self.clock()
        try:
            self._store_search_page(query_key, page, response, now)
        except StorageFailure as e:
            log_with_context(
                logger, "error", "Failed to cache search results", query_key=query_key, error=str(e)
            )
            return Result.failure(e)
        self._sweep_expired(query_key, now)

        return Result.success(
            SearchResult(photos=list(response.photos), has_next_page=response.has_more, from_cache=False)
        )

    def _store_search_page(
        self, query_key: str, page: int, response: SearchPage, now: int
    ) -> None:
        rows = [
            photo.to_cached(
                query_key=query_key,
                page_index=page,
                is_favorite=self._existing_favorite(photo.id),
                updated_at=now,
            )
            for photo in response.photos
        ]
        self.record_store.upsert_many(rows)

    def _sweep_expired(self, query_key: str, now: int) -> None:
        """Drop stale non-favorite rows of a query; the fetched page is already stored"""
        cutoff = now - self.config.cache_max_age_ms
        try:
            deleted = self.record_store.delete_older_than(query_key, cutoff)
        except StorageFailure as e:
            log_with_context(
                logger, "warning", "Expiry sweep failed", query_key=query_key, error=str(e)
            )
            return
        if deleted:
            log_with_context(
                logger, "info", "Expired cache rows removed", query_key=query_key, deleted=deleted
            )

    def _fallback_to_cache(
        self, query_key: str, page: int, error: CatalogError
    ) -> Result[SearchResult]:
        log_with_context(
            logger,
            "warning",
            "Catalog search failed",
            query_key=query_key,
            page=page,
            error=error.message,
            error_type=type(error).__name__,
        )
        try:
            cached = self.record_store.get_by_query_and_page(query_key, page)
        except StorageFailure as e:
            log_with_context(logger, "warning", "Stale cache read failed", error=str(e))
            cached = []

        if not cached:
            return Result.failure(error)

        log_with_context(logger, "info", "Serving stale cache", query_key=query_key, page=page)
        return Result.success(
            SearchResult(
                photos=[record.photo for record in cached],
                has_next_page=False,
                from_cache=True,
            )
        )

    def get_last_searched_query(self) -> str | None:
        """Most recently used normalized query, None if there is none"""
        recent = self.recent_store.most_recent(1)
        return recent[0].query if recent else None

    def get_cached_photos_for_last_search(self) -> list[Photo]:
        """
        Page 1 of the most recent search, straight from the cache.

        Offline bootstrap: only the first page is replayed.
        """
        last_query = self.get_last_searched_query()
        if last_query is None:
            return []
        return [record.photo for record in self.record_store.get_by_query_and_page(last_query, 1)]

    def get_cached_photos_for_query(self, query: str) -> list[Photo]:
        """Every cached page of a query, in page order"""
        return [record.photo for record in self.record_store.get_by_query(normalize_query(query))]

    # ==================== Photo details ====================

    def get_photo_by_id(self, photo_id: int) -> Result[Photo]:
        """
        Get a photo, cache first.

        Cached photos are served without an age check. On a miss the photo is
        fetched and stored under the "detail" key.
        """
        try:
            cached = self.record_store.get_by_id(photo_id)
        except StorageFailure as e:
            return Result.failure(e)
        if cached is not None:
            log_with_context(logger, "debug", "Photo cache hit", photo_id=photo_id)
            return Result.success(cached.photo)

        log_with_context(logger, "debug", "Network fetch photo", photo_id=photo_id)
        try:
            photo = self.catalog.fetch_by_id(photo_id)
        except Exception as e:
            error = _as_catalog_error(e)
            log_with_context(
                logger, "warning", "Photo lookup failed", photo_id=photo_id, error=error.message
            )
            return Result.failure(error)

        try:
            self.record_store.upsert_one(
                photo.to_cached(
                    query_key=DETAIL_QUERY_KEY,
                    page_index=DETAIL_PAGE_INDEX,
                    is_favorite=self._existing_favorite(photo.id),
                    updated_at=self.clock(),
                )
            )
        except StorageFailure as e:
            return Result.failure(e)

        return Result.success(photo)

    def observe_photo(self, photo_id: int) -> LiveQuery[Photo | None]:
        """Live view of one cached photo (None while absent)"""

        def fetch():
            cached = self.record_store.get_by_id(photo_id)
            return cached.photo if cached else None

        return LiveQuery(self.notifier, (PHOTOS_TABLE,), fetch)

    # ==================== Favorites ====================

    def toggle_favorite(self, photo_id: int) -> bool:
        """
        Flip the favorite flag of a photo.

        Returns:
            The new flag

        Raises:
            StorageFailure: If the flag could not be read or written
        """
        current = self.record_store.is_favorite(photo_id) or False
        self.record_store.set_favorite(photo_id, not current)
        log_with_context(logger, "info", "Favorite updated", photo_id=photo_id, is_favorite=not current)
        return not current

    def set_favorite(self, photo_id: int, is_favorite: bool) -> None:
        self.record_store.set_favorite(photo_id, is_favorite)

    def is_favorite(self, photo_id: int) -> bool:
        return self.record_store.is_favorite(photo_id) or False

    def list_favorites(self) -> LiveQuery[list[Photo]]:
        """Live list of favorite photos, most recently updated first"""
        return LiveQuery(
            self.notifier,
            (PHOTOS_TABLE,),
            lambda: [record.photo for record in self.record_store.list_favorites()],
        )

    def _existing_favorite(self, photo_id: int) -> bool:
        """Favorite flag of an existing row; lookup failures count as not favorite"""
        try:
            return self.record_store.is_favorite(photo_id) or False
        except StorageFailure as e:
            log_with_context(
                logger, "warning", "Favorite lookup failed", photo_id=photo_id, error=str(e)
            )
            return False

    # ==================== Recent queries ====================

    def _remember_query(self, query_key: str) -> None:
        """Record a search term; failures never abort the search"""
        if not query_key:
            return
        try:
            self.recent_store.touch(query_key, self.clock())
            self.recent_store.retain_only(self.config.recent_query_limit)
        except PexelsCacheException as e:
            log_with_context(
                logger, "warning", "Recent query bookkeeping failed", query_key=query_key, error=str(e)
            )

    def recent_queries(self, limit: int | None = None) -> LiveQuery[list[str]]:
        """Live list of recent normalized queries, newest first"""
        if limit is None:
            limit = self.config.recent_query_limit
        return LiveQuery(
            self.notifier,
            (RECENT_SEARCHES_TABLE,),
            lambda: [entry.query for entry in self.recent_store.most_recent(limit)],
        )

    def delete_recent_query(self, query: str) -> None:
        self.recent_store.delete(normalize_query(query))

    def clear_recent_queries(self) -> None:
        self.recent_store.clear_all()

    # ==================== Cache maintenance ====================

    def clear_cache(self) -> int:
        """Drop every cached photo except favorites"""
        deleted = self.record_store.clear_non_favorites()
        log_with_context(logger, "info", "Cache cleared (favorites kept)", deleted=deleted)
        return deleted

    def refresh_cache(self, query: str, include_favorites: bool = False) -> int:
        """
        Invalidate the cache of one query so the next search refetches it.

        Args:
            query: Raw or normalized query
            include_favorites: Also drop favorite rows of that query
        """
        query_key = normalize_query(query)
        deleted = self.record_store.delete_all_for_query(query_key, include_favorites=include_favorites)
        log_with_context(logger, "info", "Cache invalidated", query_key=query_key, deleted=deleted)
        return deleted

    def invalidate_all(self) -> int:
        """Drop every cached photo, favorites included"""
        deleted = self.record_store.delete_everything()
        log_with_context(logger, "warning", "Cache fully invalidated", deleted=deleted)
        return deleted

    def get_stats(self) -> dict:
        """
        Get cache statistics

        Returns:
            Dictionary with record, favorite and recent-query counts
        """
        last_query = self.get_last_searched_query()
        return {
            "total_records": self.record_store.count_all(),
            "favorite_records": self.record_store.count_favorites(),
            "recent_queries": self.recent_store.count(),
            "last_query": last_query,
            "last_query_records": (
                self.record_store.count_for_query(last_query) if last_query else 0
            ),
            "cache_max_age_ms": self.config.cache_max_age_ms,
        }
