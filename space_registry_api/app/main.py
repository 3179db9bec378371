"""
Main entrypoint for the Space Registry API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn space_registry_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable requests (bad enum, wrong JSON type) as HTTP 400."""
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the request validation handler and
    mounts the v1 router under ``settings.api_prefix``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup messages
    # are formatted consistently.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.debug("Ship routes mounted under %s/ships", settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
