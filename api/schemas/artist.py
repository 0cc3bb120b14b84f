"""
Pydantic schemas for artist records.

``ArtistIn`` is the body accepted on create and update; the id is always
assigned by the service, so any ``id`` a client sends is ignored.
``ArtistOut`` is what the API returns.
"""

from pydantic import BaseModel, Field, field_validator

from api.domain.artists import Artist


class ArtistIn(BaseModel):
    """Schema for creating or replacing an artist."""

    name: str = Field(..., description="Artist name, unique across the collection")
    genre: str = Field("", description="Free-form genre description")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v


class ArtistOut(BaseModel):
    """Schema for reading an artist."""

    id: str
    name: str
    genre: str

    @classmethod
    def from_artist(cls, artist: Artist) -> "ArtistOut":
        return cls(id=artist.id, name=artist.name, genre=artist.genre)
