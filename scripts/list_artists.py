#!/usr/bin/env python3
"""
Print the artists stored in the JSON data file.

Usage:
  python scripts/list_artists.py [--search fragment] [--file data/artistes.json]
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
from api.services.artist_service import ArtistService  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="List stored artists")
    ap.add_argument("--search", help="Only names containing this text (case-insensitive)")
    ap.add_argument("--file", default=str(settings.data_file), help="JSON data file")
    args = ap.parse_args(argv)

    svc = ArtistService(ArtistsJsonStorage(args.file), id_strategy=settings.id_strategy)
    try:
        artists = svc.search(args.search) if args.search is not None else svc.list_all()
    except StorageError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    if not artists:
        print("No artists found")
        return 0
    for artist in artists:
        print(f"{artist.id}\t{artist.name}\t{artist.genre}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
