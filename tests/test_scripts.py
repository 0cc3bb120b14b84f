from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for p in (ROOT, ROOT / "scripts"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

import add_artist  # noqa: E402
import list_artists  # noqa: E402


def test_add_artist_creates_file_and_prints_id(tmp_path, capsys):
    path = tmp_path / "artistes.json"
    rc = add_artist.main(["--name", "Artiste 1", "--genre", "Rock", "--file", str(path), "--create"])
    assert rc == 0
    assert "ID: 1" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8")) == [
        {"id": "1", "name": "Artiste 1", "genre": "Rock"}
    ]


def test_add_artist_duplicate_fails(tmp_path, capsys):
    path = tmp_path / "artistes.json"
    add_artist.main(["--name", "Same", "--file", str(path), "--create"])
    rc = add_artist.main(["--name", "Same", "--file", str(path)])
    assert rc == 1
    assert "already exists" in capsys.readouterr().err


def test_add_artist_missing_file_fails(tmp_path, capsys):
    rc = add_artist.main(["--name", "X", "--file", str(tmp_path / "missing.json")])
    assert rc == 1
    assert "not found" in capsys.readouterr().err


def test_add_artist_create_failure_exits_cleanly(tmp_path, capsys):
    # a regular file where the data directory should be
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    rc = add_artist.main(["--name", "X", "--file", str(blocker / "artistes.json"), "--create"])
    assert rc == 1
    assert "Could not write" in capsys.readouterr().err


def test_list_artists_with_search(tmp_path, capsys):
    path = tmp_path / "artistes.json"
    for name in ("Artiste 1", "Artiste 2", "Other"):
        add_artist.main(["--name", name, "--file", str(path), "--create"])
    capsys.readouterr()
    assert list_artists.main(["--file", str(path), "--search", "art"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split("\t")[1] for line in lines] == ["Artiste 1", "Artiste 2"]


def test_list_artists_empty(tmp_path, capsys):
    path = tmp_path / "artistes.json"
    path.write_text("[]", encoding="utf-8")
    assert list_artists.main(["--file", str(path)]) == 0
    assert "No artists found" in capsys.readouterr().out
