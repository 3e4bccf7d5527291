import logging

from sqlalchemy import ColumnElement, or_, true
from sqlalchemy.ext.asyncio import AsyncSession

from hackernews.crud.base import CRUDBase
from hackernews.models.link import Link
from hackernews.schemas.link import LinkCreate

logger = logging.getLogger(__name__)


def build_feed_filter(filter_needle: str | None) -> ColumnElement[bool]:
    """Builds the WHERE clause for the feed.

    A link matches when the needle is a substring of its description or of
    its url. ``autoescape`` keeps ``%`` and ``_`` in the needle literal. With
    no needle (or an empty one) every link matches.
    """
    if not filter_needle:
        return true()
    return or_(
        Link.description.contains(filter_needle, autoescape=True),
        Link.url.contains(filter_needle, autoescape=True),
    )


class CRUDLink(CRUDBase[Link, LinkCreate]):
    async def aget_feed(
        self,
        db: AsyncSession,
        *,
        filter_needle: str | None = None,
        skip: int = 0,
        take: int,
    ) -> list[Link]:
        return await self.aget_multi(
            db, where=build_feed_filter(filter_needle), skip=skip, limit=take
        )

    async def acreate(self, db: AsyncSession, *, obj_in: LinkCreate) -> Link:
        link = await super().acreate(db, obj_in=obj_in)
        logger.info(f"Created Link {link.id}", extra={"props": {"url": link.url}})
        return link


link = CRUDLink(Link)
