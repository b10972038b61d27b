"""Entry point for the Users API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port, log level and the id strategy are read from environment
variables (``HOST``, ``PORT``, ``LOG_LEVEL``, ``ID_STRATEGY``); see
``users_api/app/core/config.py``.  Without any of them set, the
service listens on port 3000.

Usage:
    python run.py
"""
import asyncio
import logging
from typing import Optional

from uvicorn import Config, Server

from users_api.app.core.config import Settings, settings
from users_api.app.main import create_app


logger = logging.getLogger(__name__)


def build_server_config(config: Optional[Settings] = None) -> Config:
    """Return the Uvicorn configuration for a freshly created app."""
    config = config or settings
    return Config(
        app=create_app(config),
        host=config.host,
        port=config.port,
        reload=False,
        # Requests are already logged by RequestLoggingMiddleware.
        access_log=False,
        log_level=config.log_level.lower(),
    )


async def main() -> None:
    """Serve the API until interrupted."""
    server = Server(build_server_config())
    logger.info("Server is running on http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
