"""
Comment Use Cases
"""

from .list_comments_use_case import ListCommentsUseCase
from .get_comment_use_case import GetCommentUseCase
from .create_comment_use_case import CreateCommentUseCase
from .update_comment_use_case import UpdateCommentUseCase
from .delete_comment_use_case import DeleteCommentUseCase
from .dtos import (
    CommentInfo,
    CommentResponse,
    CreateCommentCommand,
    UpdateCommentCommand,
)

__all__ = [
    # Use Cases
    "ListCommentsUseCase",
    "GetCommentUseCase",
    "CreateCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
    # DTOs
    "CreateCommentCommand",
    "UpdateCommentCommand",
    "CommentInfo",
    "CommentResponse",
]
