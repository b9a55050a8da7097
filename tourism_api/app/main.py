"""
Main entrypoint for the Tourism API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
the app around an explicitly supplied entity store (a fresh seeded one
when none is given); the module‑level ``app`` is what ASGI servers
import, e.g.::

    uvicorn tourism_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .services.storage import MemStorage

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Flatten pydantic error entries into one human readable message.

    Each entry becomes ``<message> at "<location>"``; the ``body``,
    ``path`` and ``query`` location prefixes are dropped.
    """
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "path", "query")]
        message = error.get("msg", "Invalid value")
        if loc:
            parts.append(f'{message} at "{".".join(loc)}"')
        else:
            parts.append(message)
    return "Validation error: " + "; ".join(parts)


@asynccontextmanager
async def lifespan(app: FastAPI):
    storage: MemStorage = app.state.storage
    logger.info(
        "Starting %s %s with %d destinations, %d experiences, %d hidden gems, %d events",
        app.title,
        app.version,
        len(storage.destinations.destinations),
        len(storage.experiences.experiences),
        len(storage.hidden_gems.hidden_gems),
        len(storage.events.events),
    )
    yield
    logger.info("Shutting down %s", app.title)


def create_app(storage: Optional[MemStorage] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[MemStorage]
        The entity store the routes operate on.  When omitted a new
        store is built, seeded according to ``seed_demo_data``.
    app_settings : Optional[Settings]
        Settings to use instead of the environment‑derived defaults.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    # Initialise logging before anything else so that the store can
    # log while it is being seeded.
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        debug=cfg.debug,
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else MemStorage(seed_demo_data=cfg.seed_demo_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = format_validation_errors(exc.errors())
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    app.include_router(v1_router, prefix=cfg.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> Dict[str, str]:
        return {"name": cfg.project_name, "version": cfg.api_version, "status": "running"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
