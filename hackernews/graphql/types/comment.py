import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from hackernews.models import Comment as CommentModel

if TYPE_CHECKING:
    from .link import Link


@strawberry.type
class Comment:
    """A comment posted on a link."""

    id: strawberry.ID
    body: str
    created_at: datetime.datetime
    link_id: strawberry.Private[int]

    @strawberry.field
    async def link(
        self, info: Info
    ) -> Annotated["Link", strawberry.lazy("hackernews.graphql.types.link")]:
        """The link this comment was posted on."""
        from hackernews.graphql.resolvers.comment import resolve_comment_link

        return await resolve_comment_link(info=info, link_id=self.link_id)

    @classmethod
    def from_model(cls, comment: CommentModel) -> "Comment":
        return cls(
            id=strawberry.ID(str(comment.id)),
            body=comment.body,
            created_at=comment.created_at,
            link_id=comment.link_id,
        )
