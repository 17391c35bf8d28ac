"""
Clients - Remote catalog implementations

- PexelsClient: CatalogClient over the Pexels REST API
"""

from .pexels_client import PexelsClient

__all__ = [
    "PexelsClient",
]
