"""
Composition root

Builds the database handle, stores, catalog client and repository once, and
hands the repository to whoever drives it (HTTP app, CLI). The caller owns the
returned database handle and closes it on shutdown.
"""

from dotenv import load_dotenv

from .clients import PexelsClient
from .core.config import RepositoryConfig, get_config_value
from .domain.repositories import CatalogClient
from .services import PhotoRepository
from .storage import SQLiteDatabase, SQLiteRecentQueryStore, SQLiteRecordStore


def build_repository(
    database_path: str | None = None,
    catalog: CatalogClient | None = None,
    config: RepositoryConfig | None = None,
) -> tuple[PhotoRepository, SQLiteDatabase]:
    """
    Wire a PhotoRepository against SQLite and the Pexels API

    Args:
        database_path: SQLite file (defaults to cache.database_path in config.yml)
        catalog: Catalog client (defaults to PexelsClient with PEXELS_API_KEY)
        config: Repository tunables (defaults to config.yml values)

    Returns:
        (repository, database) tuple
    """
    load_dotenv()

    catalog = catalog or PexelsClient()
    database = SQLiteDatabase(
        database_path or get_config_value("cache.database_path", "data/pexels_cache.db")
    )
    repository = PhotoRepository(
        record_store=SQLiteRecordStore(database),
        recent_store=SQLiteRecentQueryStore(database),
        catalog=catalog,
        notifier=database.notifier,
        config=config or RepositoryConfig.from_config(),
    )
    return repository, database
