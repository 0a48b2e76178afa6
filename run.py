"""Entry point for the VME Blog API.

This script starts the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the database path, storage backend and comments
service URL is read from environment variables; see
``vme_blog_api/app/core/config.py`` for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from vme_blog_api.app.core.config import settings
from vme_blog_api.app.main import app


async def run_api() -> None:
    """Serve the API using Uvicorn.

    Host and port are read from the ``API_HOST`` and ``API_PORT``
    environment variables.  Defaults are ``0.0.0.0`` and ``8000``.
    """
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s", settings.project_name, settings.api_host, settings.api_port
    )
    asyncio.run(run_api())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
