"""
JSON file persistence for artist records.

The whole collection is the unit of storage: every read loads the full
array and every write replaces the file content. There is no locking, so
two concurrent read-modify-write cycles can lose an update.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence
import json
import logging

from api.domain.artists import Artist
from .base import StorageFileMissingError, StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)


class ArtistsJsonStorage:
    """Reads and writes the artist list as a single pretty-printed JSON array."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def read_all(self) -> List[Artist]:
        logger.info("Reading artists from %s", self.path)
        if not self.path.exists():
            logger.error("Artist file %s does not exist", self.path)
            raise StorageFileMissingError(self.path)
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw) if raw.strip() else None
            if data is None:
                data = []
            if not isinstance(data, list):
                raise ValueError("Artist file must hold a JSON array")
            artists = [Artist.from_dict(item) for item in data]
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.error("Failed to read artist file %s: %s", self.path, exc)
            raise StorageReadError(self.path) from exc
        logger.info("Read %d artists from %s", len(artists), self.path)
        return artists

    def write_all(self, artists: Sequence[Artist]) -> None:
        logger.info("Writing %d artists to %s", len(artists), self.path)
        try:
            payload = json.dumps([a.to_dict() for a in artists], ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write artist file %s: %s", self.path, exc)
            raise StorageWriteError(self.path) from exc

    def ensure_exists(self) -> bool:
        """Create the file holding an empty array when absent. Returns True if created."""
        if self.path.exists():
            return False
        logger.info("Creating empty artist file at %s", self.path)
        self.write_all([])
        return True
