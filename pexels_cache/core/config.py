# pexels_cache/core/config.py - Configuration management
import os
from dataclasses import dataclass
from typing import Any

import yaml

CONFIG_FILE = os.getenv("PEXELS_CACHE_CONFIG", "config.yml")


def load_config() -> dict[str, Any]:
    """Load configuration from config.yml"""
    if not os.path.exists(CONFIG_FILE):
        # Return default config if file doesn't exist
        return get_default_config()

    with open(CONFIG_FILE, encoding="utf-8") as f:
        return yaml.safe_load(f) or get_default_config()


def get_default_config() -> dict[str, Any]:
    """Return default configuration"""
    return {
        "pexels": {
            "base_url": "https://api.pexels.com/",
            "timeout_sec": 30.0,
            "user_agent": "pexels-cache/0.1 (+local)",
        },
        "cache": {
            "database_path": "data/pexels_cache.db",
            "max_age_ms": 86_400_000,
        },
        "search": {
            "default_per_page": 15,
            "max_per_page": 80,
        },
        "recent_queries": {
            "limit": 10,
        },
        "logging": {
            "level": "INFO",
            "format": "json",
        },
    }


def get_config_value(path: str, default: Any = None) -> Any:
    """Get configuration value by dot-separated path (e.g., 'cache.max_age_ms')"""
    config = load_config()
    keys = path.split(".")
    value = config

    try:
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError):
        return default


@dataclass(frozen=True)
class RepositoryConfig:
    """Tunables consumed by PhotoRepository"""

    cache_max_age_ms: int = 86_400_000
    recent_query_limit: int = 10
    default_per_page: int = 15

    def __post_init__(self):
        if self.cache_max_age_ms < 0:
            raise ValueError("cache_max_age_ms must be >= 0")
        if self.recent_query_limit < 1:
            raise ValueError("recent_query_limit must be >= 1")
        if self.default_per_page < 1:
            raise ValueError("default_per_page must be >= 1")

    @classmethod
    def from_config(cls) -> "RepositoryConfig":
        """Build from config.yml values, falling back to the built-in defaults"""
        return cls(
            cache_max_age_ms=int(get_config_value("cache.max_age_ms", 86_400_000)),
            recent_query_limit=int(get_config_value("recent_queries.limit", 10)),
            default_per_page=int(get_config_value("search.default_per_page", 15)),
        )
