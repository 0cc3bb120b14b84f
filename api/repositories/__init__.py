"""
Persistence adapters.

These modules encapsulate how artist records are stored/retrieved (a JSON
file today, memory in tests). Services depend on the ArtistStorage
interface rather than touching the JSON file.
"""

from .base import (
    ArtistStorage,
    StorageError,
    StorageFileMissingError,
    StorageReadError,
    StorageWriteError,
)
from .json_storage import ArtistsJsonStorage
from .memory_storage import InMemoryArtistStorage

__all__ = [
    "ArtistStorage",
    "ArtistsJsonStorage",
    "InMemoryArtistStorage",
    "StorageError",
    "StorageFileMissingError",
    "StorageReadError",
    "StorageWriteError",
]
