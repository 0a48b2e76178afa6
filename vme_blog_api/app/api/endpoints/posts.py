"""
Post endpoints.

Read‑only routes over the post store: list every post, fetch one by
id, or fetch one by slug.  A slug matches when it occurs anywhere in
the post's ``url``, ignoring case; if several posts match, the one
with the lowest id wins.  Lookups that find nothing answer 404.

Handlers are plain functions: the repositories block on I/O, and
FastAPI runs sync handlers in its worker threadpool.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from vme_blog_api.app.api.deps import get_post_repository
from vme_blog_api.app.repositories.post_repository import PostRepository
from vme_blog_api.app.schemas.post import PostRead

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[PostRead])
def list_posts(repository: PostRepository = Depends(get_post_repository)) -> List[PostRead]:
    """Return all posts ordered by id."""
    return repository.find_all()


@router.get("/slug/{slug}", response_model=PostRead)
def get_post_by_slug(
    slug: str,
    repository: PostRepository = Depends(get_post_repository),
) -> PostRead:
    """Retrieve the first post whose url contains ``slug``.

    Returns HTTP 404 if no post matches.
    """
    post = repository.find_by_slug(slug)
    if post is None:
        logger.debug("No post matches slug %r", slug)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.get("/{post_id}", response_model=PostRead)
def get_post(
    post_id: int,
    repository: PostRepository = Depends(get_post_repository),
) -> PostRead:
    """Retrieve a single post by ID.

    Returns HTTP 404 if the post is not found.
    """
    post = repository.find_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post
