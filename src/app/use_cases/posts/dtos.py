"""
Post Use Case DTOs (Data Transfer Objects)

Command and Response classes for the post domain.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.comments.dtos import CommentInfo
from src.domain.entities import Comment, Post


# ============================================================================
# Command DTOs
# ============================================================================


class CreatePostCommand(BaseModel):
    """
    Create post command

    user_id is the owner declared in the request body; when omitted the
    post is attributed to the authenticated caller.
    """

    title: str
    content: str
    user_id: Optional[UUID] = None


class UpdatePostCommand(BaseModel):
    title: str
    content: str


# ============================================================================
# Response DTOs
# ============================================================================


class PostResponse(BaseModel):
    """Post fields as stored"""

    id: str
    title: str
    content: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            user_id=str(post.user_id),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostDetailResponse(PostResponse):
    """Post together with its comments"""

    comments: List[CommentInfo] = []

    @classmethod
    def build(cls, post: Post, comments: List[Comment]) -> "PostDetailResponse":
        return cls(
            **PostResponse.from_entity(post).model_dump(),
            comments=[CommentInfo.from_entity(c) for c in comments],
        )
