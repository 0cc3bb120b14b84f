"""Domain model for artist records and id assignment."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Iterable, Mapping


@dataclass
class Artist:
    id: str
    name: str
    genre: str = ""

    def to_dict(self) -> dict:
        # key order is the persisted field order
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Artist":
        """Build an Artist from a decoded JSON object.

        Raises ValueError when the mapping is not an artist record.
        """
        if not isinstance(data, Mapping):
            raise ValueError("Artist record must be an object")
        artist_id = data.get("id")
        name = data.get("name")
        # absent or null genre reads as empty; anything else must be a string
        genre = data.get("genre")
        if genre is None:
            genre = ""
        if not isinstance(artist_id, str) or not isinstance(name, str) or not isinstance(genre, str):
            raise ValueError("Artist record needs string id, name and genre")
        return cls(id=artist_id, name=name, genre=genre)


def next_id_by_count(artists: Iterable[Artist]) -> str:
    """Id as (current count + 1). Can repeat an existing id after deletions."""
    return str(len(list(artists)) + 1)


def next_id_by_sequence(artists: Iterable[Artist]) -> str:
    """Id one past the highest numeric id in use; non-numeric ids are ignored."""
    highest = 0
    for artist in artists:
        if artist.id.isdigit():
            highest = max(highest, int(artist.id))
    return str(highest + 1)


ID_GENERATORS = {
    "count": next_id_by_count,
    "sequence": next_id_by_sequence,
}


def name_matches(artist: Artist, fragment: str) -> bool:
    """Case-insensitive substring match on the artist name."""
    return fragment.casefold() in artist.name.casefold()
