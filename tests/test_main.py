"""Tests for application assembly and startup."""

import pytest
from fastapi.testclient import TestClient

from vme_blog_api.app.core.config import Settings
from vme_blog_api.app.core.exceptions import SeedDataError
from vme_blog_api.app.main import create_app
from vme_blog_api.app.repositories.post_repository import (
    InMemoryPostRepository,
    SQLitePostRepository,
)

from tests.conftest import CommentsStub, make_comment_client


def test_startup_fails_on_malformed_seed_data(tmp_path):
    seed_file = tmp_path / "posts.json"
    seed_file.write_text("{not json", encoding="utf-8")
    app = create_app(
        repository=InMemoryPostRepository(),
        comment_client=make_comment_client(CommentsStub()),
        seed_data_path=str(seed_file),
    )

    with pytest.raises(SeedDataError):
        with TestClient(app):
            pass


def test_startup_builds_configured_store(tmp_path):
    settings = Settings(
        storage_backend="sqlite",
        database_url=str(tmp_path / "blog.db"),
        comments_api_base_url="https://comments.invalid",
    )
    app = create_app(settings=settings)

    with TestClient(app) as client:
        assert isinstance(app.state.post_repository, SQLitePostRepository)
        assert app.state.comment_client.comments_url == "https://comments.invalid/comments"
        posts = client.get("/api/posts").json()

    assert len(posts) == 10

    # A restart against the same database keeps the data and does not reseed.
    with TestClient(create_app(settings=settings)) as client:
        assert len(client.get("/api/posts").json()) == 10


def test_openapi_lists_post_routes(client):
    paths = client.get("/openapi.json").json()["paths"]

    assert set(paths) >= {"/api/posts", "/api/posts/{post_id}", "/api/posts/slug/{slug}"}


def test_startup_rejects_in_memory_sqlite_url():
    settings = Settings(storage_backend="sqlite", database_url=":memory:")
    app = create_app(
        settings=settings,
        comment_client=make_comment_client(CommentsStub()),
    )

    with pytest.raises(ValueError, match="STORAGE_BACKEND=memory"):
        with TestClient(app):
            pass
