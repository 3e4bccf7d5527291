import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hackernews.crud.base import CRUDBase
from hackernews.models.comment import Comment
from hackernews.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


class CRUDComment(CRUDBase[Comment, CommentCreate]):
    async def aget_multi_by_link(
        self, db: AsyncSession, *, link_id: int
    ) -> list[Comment]:
        """Gets every comment posted on a link, oldest first."""
        return await self.aget_multi(
            db, where=Comment.link_id == link_id, limit=None
        )

    async def acreate(self, db: AsyncSession, *, obj_in: CommentCreate) -> Comment:
        comment = await super().acreate(db, obj_in=obj_in)
        logger.info(
            f"Created Comment {comment.id} on Link {comment.link_id}",
            extra={"props": {"comment_id": comment.id, "link_id": comment.link_id}},
        )
        return comment


comment = CRUDComment(Comment)
