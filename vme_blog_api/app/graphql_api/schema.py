"""
GraphQL schema and router.

Query fields mirror the REST lookups:

* ``findAllPosts`` – every post, ordered by id.
* ``findPostById(id)`` – a post or ``null``.
* ``findPostBySlug(slug)`` – the first post whose url contains the
  slug (case‑insensitive), or ``null``.

Repository calls block, so resolvers push them to the threadpool.
The per‑request context carries the post repository and a fresh
comment loader.
"""

from typing import Annotated, Any, Dict, List, Optional

import strawberry
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from vme_blog_api.app.graphql_api.loaders import build_comment_loader
from vme_blog_api.app.graphql_api.types import PostType


@strawberry.type
class Query:
    @strawberry.field(description="All posts ordered by id")
    async def find_all_posts(self, info: Info) -> List[PostType]:
        repository = info.context["post_repository"]
        posts = await run_in_threadpool(repository.find_all)
        return [PostType.from_schema(post) for post in posts]

    @strawberry.field(description="Post with the given id, or null")
    async def find_post_by_id(
        self,
        info: Info,
        post_id: Annotated[int, strawberry.argument(name="id")],
    ) -> Optional[PostType]:
        repository = info.context["post_repository"]
        post = await run_in_threadpool(repository.find_by_id, post_id)
        return PostType.from_schema(post) if post is not None else None

    @strawberry.field(description="First post whose url contains the slug, ignoring case")
    async def find_post_by_slug(self, info: Info, slug: str) -> Optional[PostType]:
        repository = info.context["post_repository"]
        post = await run_in_threadpool(repository.find_by_slug, slug)
        return PostType.from_schema(post) if post is not None else None


schema = strawberry.Schema(query=Query)


async def get_context(request: Request) -> Dict[str, Any]:
    """Build the context for one GraphQL request."""
    state = request.app.state
    return {
        "post_repository": state.post_repository,
        "comment_loader": build_comment_loader(state.comment_client),
    }


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    """Create the router serving ``schema``; GraphiQL is optional."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
