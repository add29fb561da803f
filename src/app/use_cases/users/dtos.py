"""
User Use Case DTOs (Data Transfer Objects)

Response classes for the user domain. The password hash is never part of
any response.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from src.app.use_cases.comments.dtos import CommentInfo
from src.app.use_cases.posts.dtos import PostResponse
from src.domain.entities import Comment, Post, User


class UserResponse(BaseModel):
    """Public user fields"""

    id: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserDetailResponse(UserResponse):
    """User together with their posts and comments"""

    posts: List[PostResponse] = []
    comments: List[CommentInfo] = []

    @classmethod
    def build(
        cls, user: User, posts: List[Post], comments: List[Comment]
    ) -> "UserDetailResponse":
        return cls(
            **UserResponse.from_entity(user).model_dump(),
            posts=[PostResponse.from_entity(p) for p in posts],
            comments=[CommentInfo.from_entity(c) for c in comments],
        )


class ChangePasswordCommand(BaseModel):
    password: str
