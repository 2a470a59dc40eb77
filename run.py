"""Entry point for the room reservations service.

Starts the FastAPI application with uvicorn.  Intended to be executed
from the project root, e.g. under Docker or a process manager where
you only specify a single Python file to run.

Configuration (``HOST``, ``PORT``, ``DATA_FILE``, ``LOG_LEVEL`` and
friends) is read from environment variables by
``room_reservations.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from room_reservations.app.core.config import settings
from room_reservations.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
