"""
Configuration helpers for the Artistes backend.

Exposes a Settings object that reads environment variables (storage path,
id strategy, logging, CORS, bind address) so that routers/services do not
fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "artistes.json"
ID_STRATEGIES = ("count", "sequence")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    create_if_missing: bool
    id_strategy: str
    log_level: str
    log_file: str
    cors_origins: tuple[str, ...]
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        items = (item.strip().rstrip("/") for item in (value or "").split(","))
        return tuple(item for item in items if item)

    strategy = (os.getenv("ARTIST_ID_STRATEGY") or "count").strip().lower()
    if strategy not in ID_STRATEGIES:
        strategy = "count"

    data_file = (os.getenv("ARTISTS_DATA_FILE") or "").strip()

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        create_if_missing=_bool(os.getenv("ARTISTS_CREATE_IF_MISSING"), False),
        id_strategy=strategy,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
