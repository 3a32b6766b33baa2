"""Pydantic data models."""

from miniblog.models.comment import Comment
from miniblog.models.post import Post

__all__ = [
    "Comment",
    "Post",
]
