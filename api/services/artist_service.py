"""Artist use cases: listing, lookup, creation, update, removal and search."""

from __future__ import annotations

import logging
from typing import List

from api.domain.artists import Artist, ID_GENERATORS, name_matches
from api.repositories.base import ArtistStorage

logger = logging.getLogger(__name__)


class ArtistError(Exception):
    """Base exception for artist workflow."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArtistNotFoundError(ArtistError):
    """Raised when no artist carries the requested id."""

    def __init__(self, artist_id: str) -> None:
        super().__init__(f"Artist with id {artist_id} was not found.")
        self.artist_id = artist_id


class ArtistAlreadyExistsError(ArtistError):
    """Raised when another artist already uses the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"An artist named {name} already exists.")
        self.name = name


class ArtistService:
    """Business rules for artist records on top of an ArtistStorage.

    Every call reloads the full collection; mutations write it back whole.
    """

    def __init__(self, storage: ArtistStorage, id_strategy: str = "count") -> None:
        if id_strategy not in ID_GENERATORS:
            raise ValueError(f"Unknown id strategy: {id_strategy}")
        self.storage = storage
        self.id_strategy = id_strategy
        self._next_id = ID_GENERATORS[id_strategy]

    def list_all(self) -> List[Artist]:
        artists = self.storage.read_all()
        logger.info("Listed %d artists", len(artists))
        return artists

    def get_by_id(self, artist_id: str) -> Artist:
        artists = self.storage.read_all()
        artist = _find(artists, artist_id)
        if artist is None:
            logger.warning("Artist %s not found", artist_id)
            raise ArtistNotFoundError(artist_id)
        return artist

    def add(self, name: str, genre: str = "") -> Artist:
        artists = self.storage.read_all()
        if any(a.name == name for a in artists):
            logger.warning("Artist %s already exists", name)
            raise ArtistAlreadyExistsError(name)
        artist = Artist(id=self._next_id(artists), name=name, genre=genre)
        artists.append(artist)
        self.storage.write_all(artists)
        logger.info("Added artist %s with id %s", name, artist.id)
        return artist

    def update(self, artist_id: str, name: str, genre: str = "") -> Artist:
        artists = self.storage.read_all()
        artist = _find(artists, artist_id)
        if artist is None:
            logger.warning("Artist %s not found for update", artist_id)
            raise ArtistNotFoundError(artist_id)
        if any(a.name == name and a is not artist for a in artists):
            logger.warning("Cannot rename artist %s: %s already exists", artist_id, name)
            raise ArtistAlreadyExistsError(name)
        artist.name = name
        artist.genre = genre
        self.storage.write_all(artists)
        logger.info("Updated artist %s: name=%s genre=%s", artist_id, name, genre)
        return artist

    def delete(self, artist_id: str) -> None:
        artists = self.storage.read_all()
        artist = _find(artists, artist_id)
        if artist is None:
            logger.warning("Artist %s not found for deletion", artist_id)
            raise ArtistNotFoundError(artist_id)
        remaining = [a for a in artists if a is not artist]
        self.storage.write_all(remaining)
        logger.info("Deleted artist %s", artist_id)

    def search(self, fragment: str) -> List[Artist]:
        fragment = fragment or ""
        found = [a for a in self.storage.read_all() if name_matches(a, fragment)]
        logger.info("Search for %r matched %d artists", fragment, len(found))
        return found


def _find(artists: List[Artist], artist_id: str) -> Artist | None:
    for artist in artists:
        if artist.id == artist_id:
            return artist
    return None
