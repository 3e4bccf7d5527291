import logging

import strawberry
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext
from strawberry.types import Info as StrawberryInfo

from hackernews.database import get_async_db
from hackernews.graphql.resolvers.comment import post_comment_on_link, resolve_comment
from hackernews.graphql.resolvers.link import post_link, resolve_feed, resolve_link
from hackernews.graphql.types import Comment, Link

from .extensions.error_handler import ErrorFormattingExtension

logger = logging.getLogger(__name__)

API_INFO = "This is the API of a Hackernews Clone"


# --- Custom Context ---
# Carries the request-scoped DB session to every resolver
class Context(BaseContext):
    def __init__(self, db: AsyncSession):
        super().__init__()
        self.db = db


async def get_context(db: AsyncSession = Depends(get_async_db)) -> Context:
    """FastAPI dependency building the GraphQL context for one request."""
    logger.debug("Creating GraphQL context")
    return Context(db=db)


# --- Root Query/Mutation Definitions ---


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> str:
        return "Hello World!"

    @strawberry.field
    def info(self) -> str:
        """A short description of this API."""
        return API_INFO

    @strawberry.field
    async def feed(
        self,
        info: StrawberryInfo,
        filter_needle: str | None = None,
        skip: int | None = 0,
        take: int | None = None,
    ) -> list[Link]:
        """Lists links whose description or url contains `filterNeedle`.

        `take` defaults to 30 and must be between 1 and 50.
        """
        return await resolve_feed(
            info=info, filter_needle=filter_needle, skip=skip, take=take
        )

    @strawberry.field
    async def link(
        self, info: StrawberryInfo, id: strawberry.ID | None = None
    ) -> Link | None:
        """Fetches a single link by its id."""
        return await resolve_link(info=info, id=id)

    @strawberry.field
    async def comment(self, info: StrawberryInfo, id: strawberry.ID) -> Comment | None:
        """Fetches a single comment by its id."""
        return await resolve_comment(info=info, id=id)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def post_link(
        self, info: StrawberryInfo, url: str, description: str
    ) -> Link:
        """Posts a new link to the feed."""
        return await post_link(info=info, url=url, description=description)

    @strawberry.mutation
    async def post_comment_on_link(
        self, info: StrawberryInfo, link_id: strawberry.ID, body: str
    ) -> Comment:
        """Posts a comment on an existing link."""
        return await post_comment_on_link(info=info, link_id=link_id, body=body)


# --- Schema Definition ---
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        ErrorFormattingExtension,
    ],
)
