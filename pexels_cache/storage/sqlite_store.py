"""
SQLite persistence for the photo cache and the recent-search list.

One SQLiteDatabase handle is created by the composition root and shared by
both stores. Statements are serialized on a single connection, and every
write runs inside one transaction, so readers never see half of a batch.
"""

import os
import sqlite3
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from ..core.exceptions import StorageFailure
from ..core.logging_config import get_logger
from ..core.observable import ChangeNotifier
from ..domain.models import CachedPhoto, Photo, PhotoSrc, RecentQuery
from ..domain.repositories import RecentQueryStore, RecordStore

logger = get_logger(__name__)

PHOTOS_TABLE = "photos"
RECENT_SEARCHES_TABLE = "recent_searches"

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS photos (
        id INTEGER PRIMARY KEY,
        width INTEGER NOT NULL,
        height INTEGER NOT NULL,
        photographer TEXT NOT NULL,
        url TEXT NOT NULL,
        original_url TEXT NOT NULL,
        large_url TEXT NOT NULL,
        medium_url TEXT NOT NULL,
        small_url TEXT NOT NULL,
        query_key TEXT NOT NULL,
        page_index INTEGER NOT NULL,
        is_favorite INTEGER NOT NULL DEFAULT 0,
        updated_at INTEGER NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_photos_query_page ON photos(query_key, page_index)",
    "CREATE INDEX IF NOT EXISTS idx_photos_favorite ON photos(is_favorite)",
    """
    CREATE TABLE IF NOT EXISTS recent_searches (
        query TEXT PRIMARY KEY,
        last_used_at INTEGER NOT NULL
    )
    """,
)

PHOTO_COLUMNS = (
    "id, width, height, photographer, url, original_url, large_url, medium_url, "
    "small_url, query_key, page_index, is_favorite, updated_at"
)


class SQLiteDatabase:
    """
    SQLite database handle.

    Usage:
        db = SQLiteDatabase("data/pexels_cache.db")
        records = SQLiteRecordStore(db)
        recent = SQLiteRecentQueryStore(db)
        ...
        db.close()
    """

    def __init__(self, path: str = ":memory:", notifier: ChangeNotifier | None = None):
        self.path = path
        self.notifier = notifier or ChangeNotifier()
        self._lock = threading.RLock()

        if path != ":memory:":
            directory = os.path.dirname(os.path.abspath(path))
            os.makedirs(directory, exist_ok=True)

        try:
            self._conn = sqlite3.connect(path, check_same_thread=False, timeout=30.0)
            self._conn.row_factory = sqlite3.Row
            with self.transaction() as cursor:
                for statement in SCHEMA:
                    cursor.execute(statement)
        except sqlite3.Error as e:
            raise StorageFailure(f"Failed to open database: {e}", details={"path": path}) from e

        logger.debug(f"Database initialized: {path}")

    @contextmanager
    def transaction(self, *changed_tables: str) -> Iterator[sqlite3.Cursor]:
        """
        Run statements in one transaction.

        Subscribers of changed_tables are notified after a successful commit.

        Raises:
            StorageFailure: If any statement or the commit fails (rolled back)
        """
        with self._lock:
            cursor = self._conn.cursor()
            try:
                yield cursor
                self._conn.commit()
            except sqlite3.Error as e:
                self._conn.rollback()
                logger.error(f"Database transaction failed: {e}")
                raise StorageFailure(str(e), details={"path": self.path}) from e
            except BaseException:
                self._conn.rollback()
                raise
            finally:
                cursor.close()

        if changed_tables:
            self.notifier.notify(*changed_tables)

    def query(self, sql: str, params: Sequence = ()) -> list[sqlite3.Row]:
        """Run a read statement and return all rows"""
        with self._lock:
            try:
                return self._conn.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                raise StorageFailure(str(e), details={"path": self.path}) from e

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def _row_to_cached_photo(row: sqlite3.Row) -> CachedPhoto:
    photo = Photo(
        id=row["id"],
        width=row["width"],
        height=row["height"],
        photographer=row["photographer"],
        url=row["url"],
        src=PhotoSrc(
            original=row["original_url"],
            large=row["large_url"],
            medium=row["medium_url"],
            small=row["small_url"],
        ),
    )
    return CachedPhoto(
        photo=photo,
        query_key=row["query_key"],
        page_index=row["page_index"],
        is_favorite=bool(row["is_favorite"]),
        updated_at=row["updated_at"],
    )


def _cached_photo_params(record: CachedPhoto) -> tuple:
    photo = record.photo
    return (
        photo.id,
        photo.width,
        photo.height,
        photo.photographer,
        photo.url,
        photo.src.original,
        photo.src.large,
        photo.src.medium,
        photo.src.small,
        record.query_key,
        record.page_index,
        int(record.is_favorite),
        record.updated_at,
    )


class SQLiteRecordStore(RecordStore):
    """RecordStore backed by the photos table"""

    def __init__(self, database: SQLiteDatabase):
        self.db = database

    def upsert_many(self, records: Sequence[CachedPhoto]) -> None:
        if not records:
            return
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.executemany(
                f"INSERT OR REPLACE INTO photos ({PHOTO_COLUMNS}) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                [_cached_photo_params(record) for record in records],
            )

    def upsert_one(self, record: CachedPhoto) -> None:
        self.upsert_many([record])

    def get_by_query_and_page(self, query_key: str, page: int) -> list[CachedPhoto]:
        rows = self.db.query(
            f"SELECT {PHOTO_COLUMNS} FROM photos "
            "WHERE query_key = ? AND page_index = ? ORDER BY page_index ASC, id ASC",
            (query_key, page),
        )
        return [_row_to_cached_photo(row) for row in rows]

    def get_by_query(self, query_key: str) -> list[CachedPhoto]:
        rows = self.db.query(
            f"SELECT {PHOTO_COLUMNS} FROM photos "
            "WHERE query_key = ? ORDER BY page_index ASC, id ASC",
            (query_key,),
        )
        return [_row_to_cached_photo(row) for row in rows]

    def get_by_id(self, photo_id: int) -> CachedPhoto | None:
        rows = self.db.query(
            f"SELECT {PHOTO_COLUMNS} FROM photos WHERE id = ? LIMIT 1", (photo_id,)
        )
        return _row_to_cached_photo(rows[0]) if rows else None

    def count_for_query(self, query_key: str) -> int:
        rows = self.db.query("SELECT COUNT(*) FROM photos WHERE query_key = ?", (query_key,))
        return rows[0][0]

    def count_all(self) -> int:
        return self.db.query("SELECT COUNT(*) FROM photos")[0][0]

    def count_favorites(self) -> int:
        return self.db.query("SELECT COUNT(*) FROM photos WHERE is_favorite = 1")[0][0]

    def set_favorite(self, photo_id: int, value: bool) -> None:
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.execute(
                "UPDATE photos SET is_favorite = ? WHERE id = ?", (int(value), photo_id)
            )

    def is_favorite(self, photo_id: int) -> bool | None:
        rows = self.db.query("SELECT is_favorite FROM photos WHERE id = ?", (photo_id,))
        return bool(rows[0][0]) if rows else None

    def list_favorites(self) -> list[CachedPhoto]:
        rows = self.db.query(
            f"SELECT {PHOTO_COLUMNS} FROM photos "
            "WHERE is_favorite = 1 ORDER BY updated_at DESC, id ASC"
        )
        return [_row_to_cached_photo(row) for row in rows]

    def delete_older_than(self, query_key: str, cutoff: int) -> int:
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.execute(
                "DELETE FROM photos WHERE query_key = ? AND is_favorite = 0 AND updated_at < ?",
                (query_key, cutoff),
            )
            return cursor.rowcount

    def delete_all_for_query(self, query_key: str, include_favorites: bool = False) -> int:
        sql = "DELETE FROM photos WHERE query_key = ?"
        if not include_favorites:
            sql += " AND is_favorite = 0"
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.execute(sql, (query_key,))
            return cursor.rowcount

    def clear_non_favorites(self) -> int:
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.execute("DELETE FROM photos WHERE is_favorite = 0")
            return cursor.rowcount

    def delete_everything(self) -> int:
        with self.db.transaction(PHOTOS_TABLE) as cursor:
            cursor.execute("DELETE FROM photos")
            return cursor.rowcount


class SQLiteRecentQueryStore(RecentQueryStore):
    """
    RecentQueryStore backed by the recent_searches table.

    Ties on last_used_at are broken by rowid; INSERT OR REPLACE gives a
    re-touched query a fresh rowid, so it ranks as the newest among equals.
    """

    def __init__(self, database: SQLiteDatabase):
        self.db = database

    def touch(self, query_key: str, timestamp: int) -> None:
        if not query_key.strip():
            return
        with self.db.transaction(RECENT_SEARCHES_TABLE) as cursor:
            cursor.execute(
                "INSERT OR REPLACE INTO recent_searches (query, last_used_at) VALUES (?, ?)",
                (query_key, timestamp),
            )

    def most_recent(self, limit: int) -> list[RecentQuery]:
        rows = self.db.query(
            "SELECT query, last_used_at FROM recent_searches "
            "ORDER BY last_used_at DESC, rowid DESC LIMIT ?",
            (limit,),
        )
        return [RecentQuery(query=row["query"], last_used_at=row["last_used_at"]) for row in rows]

    def delete(self, query_key: str) -> None:
        with self.db.transaction(RECENT_SEARCHES_TABLE) as cursor:
            cursor.execute("DELETE FROM recent_searches WHERE query = ?", (query_key,))

    def clear_all(self) -> None:
        with self.db.transaction(RECENT_SEARCHES_TABLE) as cursor:
            cursor.execute("DELETE FROM recent_searches")

    def retain_only(self, limit: int) -> int:
        with self.db.transaction(RECENT_SEARCHES_TABLE) as cursor:
            cursor.execute(
                """
                DELETE FROM recent_searches
                WHERE query NOT IN (
                    SELECT query FROM recent_searches
                    ORDER BY last_used_at DESC, rowid DESC
                    LIMIT ?
                )
                """,
                (max(0, limit),),
            )
            return cursor.rowcount

    def count(self) -> int:
        return self.db.query("SELECT COUNT(*) FROM recent_searches")[0][0]
