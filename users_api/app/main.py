"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn users_api.app.main:app --port 3000

or simply ``python run.py`` from the project root.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware, RequirePathMiddleware
from .core.store import UserStore


logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call returns an independent application with its own store
    seeded with the initial users, so tests can create fresh apps
    freely.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to build the app from.  Defaults to the module-level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    setup_logging(config.log_level, config.log_file or None)

    # Interactive docs are only exposed in debug mode; otherwise
    # /docs and friends fall through to "Route not found".
    docs_enabled = config.debug
    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        redirect_slashes=False,
    )

    app.state.store = UserStore.seeded(config.id_strategy)
    logger.info(
        "Store initialised with %d seed users (id strategy: %s)",
        len(app.state.store),
        app.state.store.id_strategy,
    )

    register_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
    # Added last so it wraps everything else and runs before routing.
    app.add_middleware(RequirePathMiddleware)

    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
