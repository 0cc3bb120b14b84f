"""In-memory artist storage, used by tests and throwaway runs."""
from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from api.domain.artists import Artist


class InMemoryArtistStorage:
    def __init__(self, artists: Optional[Iterable[Artist]] = None) -> None:
        self._artists: List[Artist] = [replace(a) for a in artists or []]
        self.writes = 0

    def read_all(self) -> List[Artist]:
        # copies, so callers mutating records do not touch the stored state
        return [replace(a) for a in self._artists]

    def write_all(self, artists: Sequence[Artist]) -> None:
        self._artists = [replace(a) for a in artists]
        self.writes += 1
