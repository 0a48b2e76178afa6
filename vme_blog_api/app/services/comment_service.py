"""
Client for the external comments service.

The service exposes a single collection endpoint, ``GET /comments``,
that returns every comment it knows about.  There is no server‑side
filter, so comments for a post are found by fetching the collection
and filtering it locally by ``postId``.  The original order of the
service's response is kept.

Every failure (network error, timeout, non‑2xx status, a body that
is not a JSON array of comments) is raised as ``CommentServiceError``.
No retries are attempted.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import httpx
from pydantic import ValidationError

from vme_blog_api.app.core.exceptions import CommentServiceError
from vme_blog_api.app.schemas.comment import CommentRead


logger = logging.getLogger(__name__)


class CommentClient:
    """Fetch comments from the external comments API.

    Args:
        base_url: Base URL of the service, e.g.
            ``https://jsonplaceholder.typicode.com``.
        timeout: Seconds to wait for the service before giving up.
        client: Optional ``httpx.AsyncClient``.  When omitted, a client
            is created for each fetch and closed afterwards.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client

    @property
    def comments_url(self) -> str:
        return f"{self.base_url}/comments"

    async def fetch_all_comments(self) -> List[CommentRead]:
        """Return every comment the service holds, in its order."""
        try:
            if self.client is not None:
                response = await self.client.get(self.comments_url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(self.comments_url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error("Comments request to %s failed: %s", self.comments_url, e)
            raise CommentServiceError(f"Failed to fetch comments: {e}") from e
        except ValueError as e:
            logger.error("Comments service returned invalid JSON: %s", e)
            raise CommentServiceError("Comments service returned invalid JSON") from e

        if not isinstance(data, list):
            raise CommentServiceError(
                f"Expected a JSON array of comments, got {type(data).__name__}"
            )
        try:
            comments = [CommentRead.model_validate(item) for item in data]
        except ValidationError as e:
            raise CommentServiceError(f"Malformed comment in response: {e}") from e
        logger.debug("Fetched %d comments from %s", len(comments), self.comments_url)
        return comments

    async def fetch_comments_for_post(self, post_id: int) -> List[CommentRead]:
        """Return the comments belonging to ``post_id``."""
        comments = await self.fetch_all_comments()
        return filter_comments_for_post(comments, post_id)


def filter_comments_for_post(comments: Iterable[CommentRead], post_id: int) -> List[CommentRead]:
    """Keep the comments whose ``post_id`` matches, preserving order."""
    return [comment for comment in comments if comment.post_id == post_id]
