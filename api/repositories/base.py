"""Storage interface shared by the artist repositories."""
from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, Sequence

from api.domain.artists import Artist


class StorageError(Exception):
    """Base exception for storage failures."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = str(path)
        self.message = message


class StorageFileMissingError(StorageError):
    """Raised when the backing file does not exist."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Artist file not found: {path}")


class StorageReadError(StorageError):
    """Raised when the backing file exists but cannot be read or parsed."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Could not read artist file: {path}")


class StorageWriteError(StorageError):
    """Raised when the collection cannot be written back."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Could not write artist file: {path}")


class ArtistStorage(Protocol):
    """Whole-collection read/write of artist records."""

    def read_all(self) -> List[Artist]:
        ...

    def write_all(self, artists: Sequence[Artist]) -> None:
        ...
