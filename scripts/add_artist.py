#!/usr/bin/env python3
"""
Add an artist directly to the JSON data file.

Usage:
  python scripts/add_artist.py --name "Artiste 3" [--genre Rock] [--file data/artistes.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings  # noqa: E402
from api.repositories.base import StorageError  # noqa: E402
from api.repositories.json_storage import ArtistsJsonStorage  # noqa: E402
from api.services.artist_service import ArtistError, ArtistService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Add an artist to the data file")
    ap.add_argument("--name", required=True, help="Artist name (must be unique)")
    ap.add_argument("--genre", default="", help="Genre description")
    ap.add_argument("--file", default=str(settings.data_file), help="JSON data file")
    ap.add_argument("--create", action="store_true", help="Create the data file when missing")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        sys.stderr.write("Error: name must not be blank\n")
        return 1

    storage = ArtistsJsonStorage(args.file)
    svc = ArtistService(storage, id_strategy=settings.id_strategy)
    try:
        if args.create:
            storage.ensure_exists()
        artist = svc.add(name, args.genre.strip())
    except (ArtistError, StorageError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    print("OK: artist added")
    print(f"  ID: {artist.id}")
    print(f"  Name: {artist.name}")
    if artist.genre:
        print(f"  Genre: {artist.genre}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
