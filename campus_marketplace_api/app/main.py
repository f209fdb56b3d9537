"""
Main entrypoint for the Campus Marketplace API.

This module assembles the FastAPI application, sets up logging, error
handlers and the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn campus_marketplace_api.app.main:app --reload
"""

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    register_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()

    return app


app = create_app()
