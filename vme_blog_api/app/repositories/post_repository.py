"""
Post storage.

``PostRepository`` is the storage interface the query layers depend
on.  Two adapters implement it:

* ``SQLitePostRepository`` keeps posts in the embedded SQLite
  database managed by ``core.db``.  Every call opens its own
  connection, so the repository is safe to share between the worker
  threads FastAPI runs sync handlers on.
* ``InMemoryPostRepository`` keeps posts in a dict guarded by a lock.
  It is handy for tests and for throwaway deployments.

Both return posts ordered by ascending ``id``, and both resolve slug
lookups to the lowest matching ``id`` so results are deterministic
for a given dataset.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from typing import Dict, Iterable, List, Optional, Protocol

from vme_blog_api.app.core.config import STORAGE_BACKENDS, Settings
from vme_blog_api.app.core.db import get_cursor, init_db
from vme_blog_api.app.core.exceptions import PostNotFoundError, PostVersionConflictError
from vme_blog_api.app.schemas.post import PostCreate, PostRead


logger = logging.getLogger(__name__)


class PostRepository(Protocol):
    """Storage interface for posts."""

    def count(self) -> int: ...

    def save_all(self, posts: Iterable[PostCreate]) -> List[PostRead]:
        """Insert all posts in one batch.  New posts start at version 0."""
        ...

    def find_all(self) -> List[PostRead]: ...

    def find_by_id(self, post_id: int) -> Optional[PostRead]: ...

    def find_by_slug(self, slug: str) -> Optional[PostRead]:
        """Return the first post whose url contains ``slug``, ignoring case."""
        ...

    def update(self, post: PostRead) -> PostRead:
        """Store ``post`` if its version matches the stored one.

        Returns the stored post with its version bumped.  Raises
        ``PostVersionConflictError`` on a stale version and
        ``PostNotFoundError`` for an unknown id.
        """
        ...


class SQLitePostRepository:
    """``PostRepository`` backed by the SQLite ``posts`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path
        init_db(db_path)

    def count(self) -> int:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM posts").fetchone()
            return row["total"]

    def save_all(self, posts: Iterable[PostCreate]) -> List[PostRead]:
        saved = [PostRead(**post.model_dump(), version=0) for post in posts]
        with get_cursor(self.db_path) as cursor:
            cursor.executemany(
                """
                INSERT INTO posts (id, title, summary, url, date_published, version)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        post.id,
                        post.title,
                        post.summary,
                        post.url,
                        post.date_published.isoformat(),
                        post.version,
                    )
                    for post in saved
                ],
            )
        logger.debug("Inserted %d posts", len(saved))
        return saved

    def find_all(self) -> List[PostRead]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute("SELECT * FROM posts ORDER BY id ASC").fetchall()
            return [self._row_to_post_read(row) for row in rows]

    def find_by_id(self, post_id: int) -> Optional[PostRead]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                "SELECT * FROM posts WHERE id = ?",
                (post_id,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_post_read(row)

    def find_by_slug(self, slug: str) -> Optional[PostRead]:
        # instr() avoids treating % and _ in the slug as LIKE wildcards.
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                """
                SELECT * FROM posts
                WHERE instr(lower(url), lower(?)) > 0
                ORDER BY id ASC
                LIMIT 1
                """,
                (slug,),
            ).fetchone()
            if not row:
                return None
            return self._row_to_post_read(row)

    def update(self, post: PostRead) -> PostRead:
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                """
                UPDATE posts
                SET title = ?, summary = ?, url = ?, date_published = ?, version = version + 1
                WHERE id = ? AND version = ?
                """,
                (
                    post.title,
                    post.summary,
                    post.url,
                    post.date_published.isoformat(),
                    post.id,
                    post.version,
                ),
            )
            if cursor.rowcount == 0:
                row = cursor.execute(
                    "SELECT version FROM posts WHERE id = ?", (post.id,)
                ).fetchone()
                if not row:
                    raise PostNotFoundError(post.id)
                raise PostVersionConflictError(post.id, post.version, row["version"])
            row = cursor.execute("SELECT * FROM posts WHERE id = ?", (post.id,)).fetchone()
        logger.info("Updated post %s to version %s", post.id, row["version"])
        return self._row_to_post_read(row)

    @staticmethod
    def _row_to_post_read(row: sqlite3.Row) -> PostRead:
        """Convert a database row to a PostRead schema instance."""
        return PostRead(
            id=row["id"],
            title=row["title"],
            summary=row["summary"] or "",
            url=row["url"],
            date_published=row["date_published"],
            version=row["version"],
        )


class InMemoryPostRepository:
    """``PostRepository`` that keeps posts in process memory."""

    def __init__(self, posts: Optional[Iterable[PostRead]] = None) -> None:
        self._lock = threading.Lock()
        self._posts: Dict[int, PostRead] = {}
        for post in posts or []:
            self._posts[post.id] = post

    def count(self) -> int:
        with self._lock:
            return len(self._posts)

    def save_all(self, posts: Iterable[PostCreate]) -> List[PostRead]:
        saved = [PostRead(**post.model_dump(), version=0) for post in posts]
        with self._lock:
            duplicates = [post.id for post in saved if post.id in self._posts]
            if duplicates:
                raise ValueError(f"Posts already exist: {duplicates}")
            for post in saved:
                self._posts[post.id] = post
        return saved

    def find_all(self) -> List[PostRead]:
        with self._lock:
            return [self._posts[post_id] for post_id in sorted(self._posts)]

    def find_by_id(self, post_id: int) -> Optional[PostRead]:
        with self._lock:
            return self._posts.get(post_id)

    def find_by_slug(self, slug: str) -> Optional[PostRead]:
        needle = slug.lower()
        for post in self.find_all():
            if needle in post.url.lower():
                return post
        return None

    def update(self, post: PostRead) -> PostRead:
        with self._lock:
            current = self._posts.get(post.id)
            if current is None:
                raise PostNotFoundError(post.id)
            if current.version != post.version:
                raise PostVersionConflictError(post.id, post.version, current.version)
            stored = post.model_copy(update={"version": current.version + 1})
            self._posts[post.id] = stored
        logger.info("Updated post %s to version %s", post.id, stored.version)
        return stored


def build_post_repository(settings: Settings) -> PostRepository:
    """Create the repository adapter selected by ``settings.storage_backend``."""
    backend = settings.storage_backend
    if backend == "sqlite":
        return SQLitePostRepository(settings.database_url)
    if backend == "memory":
        return InMemoryPostRepository()
    raise ValueError(
        f"Unknown storage backend {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}"
    )
