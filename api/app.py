"""
FastAPI application for the Artistes API.

``create_app`` wires settings, logging, storage and the artist service
together; ``app`` is the instance served by ``uvicorn api.app:app``.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.core.config import Settings, get_settings
from api.core.logging_config import setup_logging
from api.repositories.base import ArtistStorage, StorageError
from api.repositories.json_storage import ArtistsJsonStorage
from api.routers import artists as artists_router
from api.services.artist_service import (
    ArtistAlreadyExistsError,
    ArtistNotFoundError,
    ArtistService,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An unexpected error occurred."
DEV_ORIGINS = {
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
}


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ArtistNotFoundError)
    async def artist_not_found(request: Request, exc: ArtistNotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(ArtistAlreadyExistsError)
    async def artist_already_exists(request: Request, exc: ArtistAlreadyExistsError):
        return _error(409, exc.message)

    @app.exception_handler(StorageError)
    async def storage_failure(request: Request, exc: StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error(500, GENERIC_ERROR)

    # the server error middleware re-raises after this, so the server logs the traceback
    @app.exception_handler(Exception)
    async def unexpected_failure(request: Request, exc: Exception):
        return _error(500, GENERIC_ERROR)


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[ArtistStorage] = None,
) -> FastAPI:
    """Build the application.

    ``storage`` overrides the JSON file named by the settings, which lets
    tests run against an in-memory collection.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    if storage is None:
        json_storage = ArtistsJsonStorage(settings.data_file)
        if settings.create_if_missing and json_storage.ensure_exists():
            logger.info("Initialised empty artist file at %s", json_storage.path)
        storage = json_storage

    app = FastAPI(title="Artistes API")
    app.state.settings = settings
    app.state.artist_service = ArtistService(storage, id_strategy=settings.id_strategy)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    _register_error_handlers(app)
    app.include_router(artists_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info(
        "Artistes API ready (env=%s, id strategy=%s)", settings.app_env, settings.id_strategy
    )
    return app


app = create_app()
