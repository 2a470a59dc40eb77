"""
Main entrypoint for the Room Reservations API.

This module assembles the FastAPI application, sets up logging, wires
the reservation store and service, registers the error handlers and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn room_reservations.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import NotFoundError, ReservationError
from .core.logging_config import setup_logging
from .core.store import ReservationStore, resolve_data_path
from .services.reservation_service import ReservationService

logger = logging.getLogger(__name__)


def resolve_static_dir(static_dir: str) -> Path:
    path = Path(static_dir)
    if path.is_absolute():
        return path
    return Path(__file__).resolve().parent / path


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": <message>}``."""

    @app.exception_handler(ReservationError)
    async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Unparseable bodies count as malformed fields: 400.
        errors = exc.errors()
        if any(e.get("type") == "json_invalid" for e in errors):
            message = "Malformed JSON body."
        elif errors:
            message = f"Invalid request: {errors[0].get('msg', 'invalid value')}"
        else:
            message = "Invalid request."
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error."},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
        Tests pass their own to point the store at a temporary file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    store = ReservationStore(resolve_data_path(settings.data_file))
    app.state.settings = settings
    app.state.reservation_service = ReservationService(store)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    static_dir = resolve_static_dir(settings.static_dir)

    @app.get("/", include_in_schema=False)
    async def landing_page() -> FileResponse:
        index = static_dir / "index.html"
        if not index.is_file():
            raise NotFoundError("Landing page not found.")
        return FileResponse(index)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the document if it does not exist yet so the data file
        # is visible as soon as the service is up.
        store.load()
        store.persist()
        logger.info("Reservation store ready at %s (%d records)", store.path, len(store.reservations))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
