"""Shared fixtures for the VME Blog API tests."""

import json
from typing import Callable, Iterator, List

import httpx
import pytest
from fastapi.testclient import TestClient

from vme_blog_api.app.main import create_app
from vme_blog_api.app.repositories.post_repository import InMemoryPostRepository
from vme_blog_api.app.services.comment_service import CommentClient


COMMENTS_BASE_URL = "https://comments.test"

HELLO_POST = {
    "id": 1,
    "title": "Hello",
    "summary": "First post",
    "url": "https://x.com/hello",
    "date_published": "2024-01-01T00:00:00",
}

SAMPLE_POSTS = [
    HELLO_POST,
    {
        "id": 5,
        "title": "My Post",
        "summary": "Five",
        "url": "https://example.com/my-post",
        "date_published": "2024-02-01T10:30:00",
    },
    {
        "id": 7,
        "title": "Another Post",
        "summary": "Seven",
        "url": "https://example.com/another-post",
        "date_published": "2024-03-01T08:00:00",
    },
]

SAMPLE_COMMENTS = [
    {"postId": 5, "id": 1, "name": "first", "email": "a@example.com", "body": "Nice"},
    {"postId": 7, "id": 2, "name": "second", "email": "b@example.com", "body": "Meh"},
    {"postId": 5, "id": 3, "name": "third", "email": "c@example.com", "body": "Again"},
]


def write_seed_file(path, posts: List[dict]) -> str:
    path.write_text(json.dumps({"posts": posts}), encoding="utf-8")
    return str(path)


def make_comment_client(
    handler: Callable[[httpx.Request], httpx.Response],
    timeout: float = 1.0,
) -> CommentClient:
    """A CommentClient whose HTTP traffic is answered by ``handler``."""
    transport = httpx.MockTransport(handler)
    return CommentClient(
        COMMENTS_BASE_URL,
        timeout=timeout,
        client=httpx.AsyncClient(transport=transport),
    )


class CommentsStub:
    """Request handler that serves a fixed comment list and counts calls."""

    def __init__(self, comments=None, status_code: int = 200) -> None:
        self.comments = SAMPLE_COMMENTS if comments is None else comments
        self.status_code = status_code
        self.calls: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return httpx.Response(self.status_code, json=self.comments)


@pytest.fixture
def seed_file(tmp_path) -> str:
    return write_seed_file(tmp_path / "posts.json", SAMPLE_POSTS)


@pytest.fixture
def comments_stub() -> CommentsStub:
    return CommentsStub()


@pytest.fixture
def repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def client(repository, comments_stub, seed_file) -> Iterator[TestClient]:
    app = create_app(
        repository=repository,
        comment_client=make_comment_client(comments_stub),
        seed_data_path=seed_file,
    )
    with TestClient(app) as test_client:
        yield test_client
