from hackernews.schemas.comment import CommentCreate
from hackernews.schemas.link import LinkCreate

__all__ = [
    "CommentCreate",
    "LinkCreate",
]
