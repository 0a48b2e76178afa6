"""
Startup seeding of the post store.

The bundled ``data/posts.json`` document is loaded only when the
store holds no posts, so restarting the service never duplicates or
overwrites data.  Seeding is not coordinated across processes: two
instances starting against the same empty database may both try to
insert, and the second one fails on the primary key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from vme_blog_api.app.core.exceptions import SeedDataError
from vme_blog_api.app.repositories.post_repository import PostRepository
from vme_blog_api.app.schemas.post import PostsEnvelope


logger = logging.getLogger(__name__)


class SeedService:
    """Service class for loading the initial posts."""

    @classmethod
    def seed_posts(cls, repository: PostRepository, data_path: Union[str, Path]) -> int:
        """Load posts from ``data_path`` into ``repository`` if it is empty.

        Returns the number of posts inserted (``0`` when the store
        already had data).  Raises ``SeedDataError`` when the file
        cannot be read or parsed, or when it lists an id twice.
        """
        existing = repository.count()
        if existing > 0:
            logger.info("Post store already holds %d posts; skipping seed", existing)
            return 0

        envelope = cls.load_posts(data_path)
        logger.info(
            "Reading %d posts from JSON data and saving to database.",
            len(envelope.posts),
        )
        saved = repository.save_all(envelope.posts)
        return len(saved)

    @staticmethod
    def load_posts(data_path: Union[str, Path]) -> PostsEnvelope:
        """Read and validate the seed document."""
        try:
            with open(data_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            envelope = PostsEnvelope.model_validate(raw)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise SeedDataError(f"Failed to read JSON data from {data_path}: {e}") from e

        seen = set()
        for post in envelope.posts:
            if post.id in seen:
                raise SeedDataError(f"Duplicate post id {post.id} in {data_path}")
            seen.add(post.id)
        return envelope
