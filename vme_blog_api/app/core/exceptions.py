"""
Domain exceptions.

Services and repositories raise these instead of library‑specific
errors so that the API layers only need to know about one hierarchy.
The original cause is always chained with ``raise ... from``.
"""


class BlogError(Exception):
    """Base class for all errors raised by the blog service."""


class SeedDataError(BlogError):
    """The bundled post dataset could not be read or parsed."""


class CommentServiceError(BlogError):
    """The external comments service failed or returned an unusable body."""


class PostNotFoundError(BlogError):
    """An update referenced a post id that is not in the store."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class PostVersionConflictError(BlogError):
    """An update carried a version that no longer matches the stored one."""

    def __init__(self, post_id: int, expected: int, actual: int) -> None:
        super().__init__(
            f"Post {post_id} was modified concurrently "
            f"(supplied version {expected}, stored version {actual})"
        )
        self.post_id = post_id
        self.expected = expected
        self.actual = actual
