"""
Main entrypoint for the VME Blog API.

This module assembles the FastAPI application, sets up logging and
mounts the REST and GraphQL routers.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``.  Importing the app here makes it easy to run
with uvicorn or another ASGI server, e.g.::

    uvicorn vme_blog_api.app.main:app --reload

Storage and the comments client are created in the application
lifespan, and the post store is seeded there before any request is
served.  A seed failure aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx
from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .graphql_api.schema import create_graphql_router
from .repositories.post_repository import PostRepository, build_post_repository
from .services.comment_service import CommentClient
from .services.seed_service import SeedService


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[PostRepository] = None,
    comment_client: Optional[CommentClient] = None,
    seed_data_path: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
    repository : Optional[PostRepository]
        Post store to use.  By default the adapter named by
        ``settings.storage_backend`` is built at startup.
    comment_client : Optional[CommentClient]
        Client for the comments service.  By default one is built from
        ``settings`` with an ``httpx.AsyncClient`` that lives as long as
        the application.
    seed_data_path : Optional[str]
        Seed document to load instead of ``settings.seed_data_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = repository if repository is not None else build_post_repository(settings)
        # Seeding errors propagate so the server never starts half‑seeded.
        loaded = SeedService.seed_posts(store, seed_data_path or settings.seed_data_path)
        if loaded:
            logger.info("Seeded %d posts", loaded)
        app.state.post_repository = store

        http_client = None
        if comment_client is not None:
            app.state.comment_client = comment_client
        else:
            http_client = httpx.AsyncClient(timeout=settings.comments_api_timeout)
            app.state.comment_client = CommentClient(
                settings.comments_api_base_url,
                timeout=settings.comments_api_timeout,
                client=http_client,
            )
        try:
            yield
        finally:
            if http_client is not None:
                await http_client.aclose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(create_graphql_router(settings.graphiql_enabled), prefix="/graphql")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
