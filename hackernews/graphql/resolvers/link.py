import logging

import strawberry
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.types import Info

from hackernews import crud
from hackernews.graphql.types.link import Link as LinkGQL
from hackernews.graphql.utils import parse_identifier, validate_skip, validate_take
from hackernews.schemas.link import LinkCreate

logger = logging.getLogger(__name__)


# --- feed Query --- #
async def resolve_feed(
    info: Info,
    filter_needle: str | None = None,
    skip: int | None = 0,
    take: int | None = None,
) -> list[LinkGQL]:
    """Lists links matching the optional needle, one page at a time."""
    # Both guards run before the session is touched
    take = validate_take(take)
    skip = validate_skip(skip)

    db: AsyncSession = info.context.db
    links = await crud.link.aget_feed(
        db=db, filter_needle=filter_needle, skip=skip, take=take
    )
    return [LinkGQL.from_model(link) for link in links]


# --- link Query --- #
async def resolve_link(info: Info, id: strawberry.ID | None) -> LinkGQL | None:
    if id is None:
        return None
    link_id = parse_identifier(id)
    if link_id is None:
        logger.debug(f"Ignoring malformed link id '{id}'")
        return None

    db: AsyncSession = info.context.db
    link = await crud.link.aget(db=db, id=link_id)
    return LinkGQL.from_model(link) if link else None


# --- postLink Mutation --- #
async def post_link(info: Info, url: str, description: str) -> LinkGQL:
    db: AsyncSession = info.context.db
    link = await crud.link.acreate(
        db=db, obj_in=LinkCreate(url=url, description=description)
    )
    return LinkGQL.from_model(link)
