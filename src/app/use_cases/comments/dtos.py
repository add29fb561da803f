"""
Comment Use Case DTOs (Data Transfer Objects)

Command and Response classes for the comment domain.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Comment, Post, User


# ============================================================================
# Command DTOs
# ============================================================================


class CreateCommentCommand(BaseModel):
    """
    Create comment command

    user_id is the owner declared in the request body; when omitted the
    comment is attributed to the authenticated caller.
    """

    content: str
    post_id: UUID
    user_id: Optional[UUID] = None


class UpdateCommentCommand(BaseModel):
    content: str


# ============================================================================
# Response DTOs
# ============================================================================


class CommentInfo(BaseModel):
    """Comment fields as stored"""

    id: str
    content: str
    user_id: str
    post_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentInfo":
        return cls(
            id=str(comment.id),
            content=comment.content,
            user_id=str(comment.user_id),
            post_id=str(comment.post_id),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentAuthor(BaseModel):
    email: str


class CommentPost(BaseModel):
    title: str


class CommentResponse(CommentInfo):
    """Comment with its author's email and its post's title"""

    user: Optional[CommentAuthor] = None
    post: Optional[CommentPost] = None

    @classmethod
    def build(
        cls, comment: Comment, user: Optional[User], post: Optional[Post]
    ) -> "CommentResponse":
        info = CommentInfo.from_entity(comment)
        return cls(
            **info.model_dump(),
            user=CommentAuthor(email=user.email) if user else None,
            post=CommentPost(title=post.title) if post else None,
        )
