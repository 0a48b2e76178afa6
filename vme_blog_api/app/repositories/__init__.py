"""
Storage adapters.

The query layers only see the ``PostRepository`` interface, so the
backing store can be swapped without touching REST or GraphQL code.
"""

from .post_repository import (  # noqa: F401
    InMemoryPostRepository,
    PostRepository,
    SQLitePostRepository,
    build_post_repository,
)
