from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Request, Response, status

from api.schemas.artist import ArtistIn, ArtistOut
from api.services.artist_service import ArtistService

router = APIRouter(prefix="/api/artistes", tags=["artistes"])
logger = logging.getLogger(__name__)


def _get_artist_service(request: Request) -> ArtistService:
    svc = getattr(getattr(request.app, "state", None), "artist_service", None)
    if not svc:
        raise RuntimeError("ArtistService not configured")
    return svc


@router.get("", response_model=List[ArtistOut])
def list_artists(request: Request):
    svc = _get_artist_service(request)
    return [ArtistOut.from_artist(a) for a in svc.list_all()]


# declared before /{artist_id} so "search" is not taken for an id
@router.get("/search", response_model=List[ArtistOut])
def search_artists(request: Request, name: str = ""):
    svc = _get_artist_service(request)
    logger.info("Searching artists with name containing %r", name)
    return [ArtistOut.from_artist(a) for a in svc.search(name)]


@router.get("/{artist_id}", response_model=ArtistOut)
def get_artist(artist_id: str, request: Request):
    svc = _get_artist_service(request)
    return ArtistOut.from_artist(svc.get_by_id(artist_id))


@router.post("", response_model=ArtistOut, status_code=status.HTTP_201_CREATED)
def create_artist(payload: ArtistIn, request: Request, response: Response):
    svc = _get_artist_service(request)
    artist = svc.add(payload.name, payload.genre)
    response.headers["Location"] = str(request.url_for("get_artist", artist_id=artist.id).path)
    logger.info("Created artist %s (%s)", artist.id, artist.name)
    return ArtistOut.from_artist(artist)


@router.put("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_artist(artist_id: str, payload: ArtistIn, request: Request):
    svc = _get_artist_service(request)
    svc.update(artist_id, payload.name, payload.genre)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_artist(artist_id: str, request: Request):
    svc = _get_artist_service(request)
    svc.delete(artist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
