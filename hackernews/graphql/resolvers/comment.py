import logging

import strawberry
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.types import Info

from hackernews import crud
from hackernews.core.exceptions import NotFoundError, StorageError, StorageErrorKind
from hackernews.graphql.types.comment import Comment as CommentGQL
from hackernews.graphql.types.link import Link as LinkGQL
from hackernews.graphql.utils import parse_identifier
from hackernews.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


def missing_link_error(link_id: str) -> NotFoundError:
    return NotFoundError(
        f"Cannot post comment on non-existing link with id '{link_id}'."
    )


# --- comment Query --- #
async def resolve_comment(info: Info, id: strawberry.ID) -> CommentGQL | None:
    comment_id = parse_identifier(id)
    if comment_id is None:
        return None

    db: AsyncSession = info.context.db
    comment = await crud.comment.aget(db=db, id=comment_id)
    return CommentGQL.from_model(comment) if comment else None


# --- Link.comments field --- #
async def resolve_link_comments(info: Info, link_id: int) -> list[CommentGQL]:
    db: AsyncSession = info.context.db
    comments = await crud.comment.aget_multi_by_link(db=db, link_id=link_id)
    return [CommentGQL.from_model(comment) for comment in comments]


# --- Comment.link field --- #
async def resolve_comment_link(info: Info, link_id: int) -> LinkGQL:
    db: AsyncSession = info.context.db
    link = await crud.link.aget(db=db, id=link_id)
    # The foreign key guarantees the row exists
    return LinkGQL.from_model(link)


# --- postCommentOnLink Mutation --- #
async def post_comment_on_link(
    info: Info, link_id: strawberry.ID, body: str
) -> CommentGQL:
    """Posts a comment on an existing link.

    A malformed id is rejected without touching storage. A well-formed id
    that matches no link is caught by the foreign key on insert. Both cases
    produce the same error, so callers cannot tell them apart.
    """
    parsed_link_id = parse_identifier(link_id)
    if parsed_link_id is None:
        logger.warning(
            "Rejected comment on malformed link id",
            extra={"props": {"link_id": link_id}},
        )
        raise missing_link_error(link_id)

    db: AsyncSession = info.context.db
    try:
        comment = await crud.comment.acreate(
            db=db, obj_in=CommentCreate(body=body, link_id=parsed_link_id)
        )
    except StorageError as e:
        if e.kind is StorageErrorKind.FOREIGN_KEY_VIOLATION:
            raise missing_link_error(link_id) from e
        raise

    return CommentGQL.from_model(comment)
