import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from hackernews.models import Link as LinkModel

if TYPE_CHECKING:
    from .comment import Comment


@strawberry.type
class Link:
    """A link posted to the feed."""

    id: strawberry.ID
    description: str
    url: str
    created_at: datetime.datetime

    @strawberry.field
    async def comments(
        self, info: Info
    ) -> list[Annotated["Comment", strawberry.lazy("hackernews.graphql.types.comment")]]:
        """Comments posted on this link, oldest first."""
        from hackernews.graphql.resolvers.comment import resolve_link_comments

        return await resolve_link_comments(info=info, link_id=int(self.id))

    @classmethod
    def from_model(cls, link: LinkModel) -> "Link":
        return cls(
            id=strawberry.ID(str(link.id)),
            description=link.description,
            url=link.url,
            created_at=link.created_at,
        )
