"""
Blog Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .post import Post
from .comment import Comment

__all__ = [
    "User",
    "Post",
    "Comment",
]
