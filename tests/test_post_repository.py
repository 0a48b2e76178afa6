"""Tests for the post storage adapters."""

from datetime import datetime

import pytest

from vme_blog_api.app.core.exceptions import PostNotFoundError, PostVersionConflictError
from vme_blog_api.app.core.config import Settings
from vme_blog_api.app.repositories.post_repository import (
    InMemoryPostRepository,
    SQLitePostRepository,
    build_post_repository,
)
from vme_blog_api.app.schemas.post import PostCreate

from tests.conftest import SAMPLE_POSTS


@pytest.fixture(params=["sqlite", "memory"])
def store(request, tmp_path):
    if request.param == "sqlite":
        return SQLitePostRepository(str(tmp_path / "posts.db"))
    return InMemoryPostRepository()


@pytest.fixture
def seeded_store(store):
    store.save_all(PostCreate(**post) for post in SAMPLE_POSTS)
    return store


def test_empty_store(store):
    assert store.count() == 0
    assert store.find_all() == []
    assert store.find_by_id(1) is None
    assert store.find_by_slug("hello") is None


def test_save_all_starts_at_version_zero(store):
    saved = store.save_all([PostCreate(**SAMPLE_POSTS[0])])

    assert [post.version for post in saved] == [0]
    assert store.count() == 1
    stored = store.find_by_id(1)
    assert stored.title == "Hello"
    assert stored.date_published == datetime(2024, 1, 1, 0, 0, 0)
    assert stored.version == 0


def test_find_all_is_ordered_by_id(store):
    store.save_all(PostCreate(**post) for post in reversed(SAMPLE_POSTS))

    assert [post.id for post in store.find_all()] == [1, 5, 7]


@pytest.mark.parametrize("slug", ["MY-POST", "my-post", "My-Po", "example.com/my"])
def test_find_by_slug_is_case_insensitive_substring(seeded_store, slug):
    post = seeded_store.find_by_slug(slug)

    assert post is not None
    assert post.id == 5


def test_find_by_slug_prefers_lowest_id(seeded_store):
    # Both example.com posts match; the first by id wins every time.
    assert seeded_store.find_by_slug("example").id == 5
    assert seeded_store.find_by_slug("EXAMPLE").id == 5


def test_find_by_slug_treats_wildcards_literally(seeded_store):
    assert seeded_store.find_by_slug("%") is None
    assert seeded_store.find_by_slug("my_post") is None


def test_misses_return_none(seeded_store):
    assert seeded_store.find_by_id(999) is None
    assert seeded_store.find_by_slug("does-not-exist") is None


def test_update_bumps_version(seeded_store):
    post = seeded_store.find_by_id(5)

    updated = seeded_store.update(post.model_copy(update={"title": "Renamed"}))

    assert updated.version == 1
    assert updated.title == "Renamed"
    assert seeded_store.find_by_id(5) == updated


def test_update_with_stale_version_is_rejected(seeded_store):
    original = seeded_store.find_by_id(5)
    seeded_store.update(original.model_copy(update={"title": "First writer"}))

    with pytest.raises(PostVersionConflictError) as exc_info:
        seeded_store.update(original.model_copy(update={"title": "Second writer"}))

    assert exc_info.value.expected == 0
    assert exc_info.value.actual == 1
    stored = seeded_store.find_by_id(5)
    assert stored.title == "First writer"
    assert stored.version == 1


def test_update_unknown_post(seeded_store):
    ghost = seeded_store.find_by_id(1).model_copy(update={"id": 404})

    with pytest.raises(PostNotFoundError):
        seeded_store.update(ghost)


def test_sqlite_store_persists_between_instances(tmp_path):
    db_path = str(tmp_path / "posts.db")
    SQLitePostRepository(db_path).save_all([PostCreate(**SAMPLE_POSTS[0])])

    reopened = SQLitePostRepository(db_path)

    assert reopened.count() == 1
    assert reopened.find_by_slug("HELLO").id == 1


def test_build_post_repository_selects_backend(tmp_path):
    sqlite_settings = Settings(storage_backend="sqlite", database_url=str(tmp_path / "x.db"))
    memory_settings = Settings(storage_backend="memory")

    assert isinstance(build_post_repository(sqlite_settings), SQLitePostRepository)
    assert isinstance(build_post_repository(memory_settings), InMemoryPostRepository)
    with pytest.raises(ValueError):
        build_post_repository(Settings(storage_backend="redis"))


@pytest.mark.parametrize("db_url", [":memory:", "file::memory:?cache=shared"])
def test_sqlite_store_rejects_in_memory_database(db_url):
    with pytest.raises(ValueError, match="STORAGE_BACKEND=memory"):
        SQLitePostRepository(db_url)
