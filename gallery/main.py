"""Application entry point for the gallery FastAPI app."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .constants import ASSETS_URL_PREFIX, UPLOADS_URL_PREFIX
from .database import create_db_engine, create_session_factory, init_db
from .logging_config import configure_logging
from .middleware import CatchAllExceptionMiddleware, MethodOverrideMiddleware
from .routers import dance_videos_router, music_router, paintings_router
from .services import TransientStorage
from .ui import router as ui_router
from .ui.template_helpers import render_template

logger = logging.getLogger(__name__)


def _mount_static(app: FastAPI, directory: Path, route: str, name: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    app.mount(route, StaticFiles(directory=str(directory), check_dir=False), name=name)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as a page instead of a JSON body."""

    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    response = render_template(
        request,
        "error.html",
        {
            "page_title": "Error",
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
        status_code=exc.status_code,
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around explicitly supplied settings.

    The engine, session factory and transient storage are created here and
    kept on ``app.state`` so request dependencies never reach for globals.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    storage = TransientStorage(settings.upload_dir)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            init_db(engine)
        except Exception:
            logger.exception("Database initialisation failed")
            raise
        logger.info("%s ready (uploads in %s)", settings.app_name, storage.directory)
        yield
        engine.dispose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.storage = storage

    app.add_middleware(CatchAllExceptionMiddleware)
    app.add_middleware(MethodOverrideMiddleware)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    app.include_router(ui_router)
    app.include_router(paintings_router)
    app.include_router(music_router)
    app.include_router(dance_videos_router)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": settings.app_name}

    _mount_static(app, storage.directory, UPLOADS_URL_PREFIX, "uploads")
    _mount_static(app, Path(settings.public_dir), ASSETS_URL_PREFIX, "assets")

    return app


__all__ = ["create_app"]
