"""
Request‑scoped loading of post comments.

Resolving ``comments`` for a list of posts would naively call the
comments service once per post.  The ``DataLoader`` built here
collects the post ids requested in the same tick and splits one
fetched comment collection between them.  The collection itself is
fetched at most once per request, even when posts are resolved in
separate batches (e.g. ``findPostById`` and ``findPostBySlug`` in the
same query).

Each key receives either its list of comments or the exception raised
by the fetch.  ``DataLoader`` raises that exception from ``load`` for
the key alone, so the failure surfaces as an error on the
``comments`` field while the rest of the response resolves normally.
"""

import asyncio
from functools import partial
from typing import List, Optional, Union

from strawberry.dataloader import DataLoader

from vme_blog_api.app.core.exceptions import CommentServiceError
from vme_blog_api.app.schemas.comment import CommentRead
from vme_blog_api.app.services.comment_service import CommentClient, filter_comments_for_post


CommentsResult = Union[List[CommentRead], CommentServiceError]


class CommentCollection:
    """The full comment collection, fetched lazily and only once."""

    def __init__(self, client: CommentClient) -> None:
        self.client = client
        self._fetch: Optional[asyncio.Future] = None

    async def get(self) -> List[CommentRead]:
        if self._fetch is None:
            self._fetch = asyncio.ensure_future(self.client.fetch_all_comments())
        return await self._fetch


async def load_comments_by_post(
    collection: CommentCollection,
    post_ids: List[int],
) -> List[CommentsResult]:
    """Batch function: one filtered list (or the fetch error) per post id."""
    try:
        comments = await collection.get()
    except CommentServiceError as e:
        return [e for _ in post_ids]
    return [filter_comments_for_post(comments, post_id) for post_id in post_ids]


def build_comment_loader(client: CommentClient) -> DataLoader:
    """Create a loader for one GraphQL request."""
    return DataLoader(load_fn=partial(load_comments_by_post, CommentCollection(client)))
