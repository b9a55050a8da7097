"""Entry point for the Tourism API server.

Launches the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under a process manager
or in Docker, where you only specify a single Python file to run.

Configuration (``HOST``, ``PORT``, ``LOG_LEVEL``, ``SEED_DEMO_DATA``,
``ALLOWED_ORIGINS`` ...) is read from environment variables; see
``tourism_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from tourism_api.app.core.config import settings
from tourism_api.app.main import app


async def run_api() -> None:
    """Serve the API on ``settings.host``/``settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")


if __name__ == "__main__":
    main()
