"""
GraphQL object types.

Field names are snake_case in Python and exposed in camelCase
(``datePublished``, ``postId``) by Strawberry's default name
converter.
"""

import logging
from datetime import datetime
from typing import List, Optional

import strawberry
from strawberry.types import Info

from vme_blog_api.app.schemas.comment import CommentRead
from vme_blog_api.app.schemas.post import PostRead


logger = logging.getLogger(__name__)


@strawberry.type(name="Comment", description="A comment owned by the external comments service")
class CommentType:
    id: int
    post_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None

    @classmethod
    def from_schema(cls, comment: CommentRead) -> "CommentType":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            name=comment.name,
            email=comment.email,
            body=comment.body,
        )


@strawberry.type(name="Post", description="A blog post")
class PostType:
    id: int
    title: str
    summary: str
    url: str
    date_published: datetime
    version: int

    @strawberry.field(
        description="Comments for this post, fetched from the comments service. "
        "Null, with an error entry, when the service call fails."
    )
    async def comments(self, info: Info) -> Optional[List[CommentType]]:
        logger.info("Fetching comments for post '%s'", self.title)
        comments = await info.context["comment_loader"].load(self.id)
        return [CommentType.from_schema(comment) for comment in comments]

    @classmethod
    def from_schema(cls, post: PostRead) -> "PostType":
        return cls(
            id=post.id,
            title=post.title,
            summary=post.summary,
            url=post.url,
            date_published=post.date_published,
            version=post.version,
        )
