"""
Shared FastAPI dependencies.

The application stores its collaborators on ``app.state`` during
startup; these helpers hand them to route handlers so tests can swap
them through ``app.dependency_overrides``.
"""

from fastapi import Request

from vme_blog_api.app.repositories.post_repository import PostRepository


def get_post_repository(request: Request) -> PostRepository:
    """Return the post repository the application was started with."""
    return request.app.state.post_repository
