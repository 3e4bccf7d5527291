from .comment import (
    post_comment_on_link,
    resolve_comment,
    resolve_comment_link,
    resolve_link_comments,
)
from .link import post_link, resolve_feed, resolve_link

__all__ = [
    # Link
    "resolve_feed",
    "resolve_link",
    "post_link",
    # Comment
    "resolve_comment",
    "resolve_link_comments",
    "resolve_comment_link",
    "post_comment_on_link",
]
