# tests/conftest.py - Shared pytest configuration and fixtures
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pexels_cache.core.config import RepositoryConfig  # noqa: E402
from pexels_cache.core.exceptions import NotFound  # noqa: E402
from pexels_cache.domain.models import Photo, PhotoSrc, SearchPage  # noqa: E402
from pexels_cache.domain.repositories import CatalogClient  # noqa: E402
from pexels_cache.services import PhotoRepository  # noqa: E402
from pexels_cache.storage import (  # noqa: E402
    SQLiteDatabase,
    SQLiteRecentQueryStore,
    SQLiteRecordStore,
)

START_MS = 1_700_000_000_000


# ========================================
# Test doubles
# ========================================


def _make_photo(photo_id: int, photographer: str = "Jane Doe") -> Photo:
    """Build a catalog photo with predictable URLs"""
    base = f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
    return Photo(
        id=photo_id,
        width=4000,
        height=3000,
        photographer=photographer,
        url=f"https://www.pexels.com/photo/{photo_id}/",
        src=PhotoSrc(
            original=base,
            large=f"{base}?h=650",
            medium=f"{base}?h=350",
            small=f"{base}?h=130",
        ),
    )


def _photo_payload(photo_id: int) -> dict:
    """Catalog JSON for a photo, with the extra fields the real API sends"""
    data = _make_photo(photo_id).to_dict()
    data["photographer_id"] = 42
    data["avg_color"] = "#7E7E7E"
    data["src"]["tiny"] = "https://images.pexels.com/tiny.jpeg"
    return data


class FakeClock:
    """Epoch-millisecond clock that ticks 1 ms per read"""

    def __init__(self, start: int = START_MS, step: int = 1):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeCatalog(CatalogClient):
    """In-memory catalog with scripted pages and failures"""

    def __init__(self):
        self.pages: dict[tuple[str, int], SearchPage] = {}
        self.photos: dict[int, Photo] = {}
        self.search_calls: list[tuple[str, int, int]] = []
        self.fetch_calls: list[int] = []
        self.error: Exception | None = None

    def add_page(self, query: str, page: int, ids: list[int], has_more: bool = True) -> SearchPage:
        next_page = f"https://api.pexels.com/v1/search/?page={page + 1}" if has_more else None
        search_page = SearchPage(photos=[_make_photo(i) for i in ids], next_page=next_page)
        self.pages[(query.strip().lower(), page)] = search_page
        return search_page

    def add_photo(self, photo_id: int) -> Photo:
        self.photos[photo_id] = _make_photo(photo_id)
        return self.photos[photo_id]

    def search(self, query: str, page: int, per_page: int) -> SearchPage:
        self.search_calls.append((query, page, per_page))
        if self.error is not None:
            raise self.error
        return self.pages.get((query.strip().lower(), page), SearchPage())

    def fetch_by_id(self, photo_id: int) -> Photo:
        self.fetch_calls.append(photo_id)
        if self.error is not None:
            raise self.error
        if photo_id not in self.photos:
            raise NotFound(f"Photo {photo_id} not found", details={"photo_id": photo_id})
        return self.photos[photo_id]


# ========================================
# Fixtures
# ========================================


@pytest.fixture
def make_photo():
    """Factory for catalog photos"""
    return _make_photo


@pytest.fixture
def photo_payload():
    """Factory for catalog photo JSON"""
    return _photo_payload


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def database(tmp_path):
    """SQLite database in a temporary file"""
    db = SQLiteDatabase(str(tmp_path / "pexels_cache.db"))
    yield db
    db.close()


@pytest.fixture
def record_store(database) -> SQLiteRecordStore:
    return SQLiteRecordStore(database)


@pytest.fixture
def recent_store(database) -> SQLiteRecentQueryStore:
    return SQLiteRecentQueryStore(database)


@pytest.fixture
def repository(record_store, recent_store, catalog, database, clock) -> PhotoRepository:
    """Repository over real SQLite stores and the fake catalog"""
    return PhotoRepository(
        record_store=record_store,
        recent_store=recent_store,
        catalog=catalog,
        notifier=database.notifier,
        config=RepositoryConfig(),
        clock=clock,
    )


# ========================================
# pytest configuration
# ========================================


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
