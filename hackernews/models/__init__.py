"""Export database models for use throughout the application."""

from hackernews.models.link import Link
from hackernews.models.comment import Comment

__all__ = [
    "Link",
    "Comment",
]
