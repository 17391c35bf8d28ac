"""
Services layer - Business logic

This module contains the orchestration that sits between callers and the
stores/catalog, separated from the HTTP and CLI layers for testability.
"""

from .photo_repository import PhotoRepository, current_millis

__all__ = [
    "PhotoRepository",
    "current_millis",
]
