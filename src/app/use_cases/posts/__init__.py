"""
Post Use Cases
"""

from .list_posts_use_case import ListPostsUseCase
from .get_post_use_case import GetPostUseCase
from .create_post_use_case import CreatePostUseCase
from .update_post_use_case import UpdatePostUseCase
from .delete_post_use_case import DeletePostUseCase
from .dtos import (
    CreatePostCommand,
    PostDetailResponse,
    PostResponse,
    UpdatePostCommand,
)

__all__ = [
    # Use Cases
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
    # DTOs
    "CreatePostCommand",
    "UpdatePostCommand",
    "PostResponse",
    "PostDetailResponse",
]
