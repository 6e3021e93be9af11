"""
Main entrypoint for the Comic Store API.

This module assembles the FastAPI application, sets up logging and
includes the resource routers under ``/api``.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn comic_store_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import InvalidRecordError
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that startup messages are formatted.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(InvalidRecordError)
    async def invalid_record_handler(request: Request, exc: InvalidRecordError) -> JSONResponse:
        # Create routes answer 400 themselves; this covers updates.
        logging.getLogger(__name__).warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": [error.to_dict() for error in exc.errors]},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
