from .comment import Comment
from .link import Link

__all__ = [
    "Comment",
    "Link",
]
