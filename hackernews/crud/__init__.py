from hackernews.crud.base import CRUDBase
from hackernews.crud.comment import comment
from hackernews.crud.errors import classify_integrity_error
from hackernews.crud.link import build_feed_filter, link

__all__ = [
    "CRUDBase",
    "classify_integrity_error",
    # Link
    "link",
    "build_feed_filter",
    # Comment
    "comment",
]
