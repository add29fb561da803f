"""
Post Entity

A titled piece of content written by one user.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Post(SQLModel, table=True):
    """
    Post entity.

    Business Rules:
    - Exactly one owning user (user_id)
    - Title at most 70 characters
    - Deleting a post deletes its comments
    """

    __tablename__ = "posts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=70)
    content: str
    user_id: UUID = Field(foreign_key="users.id", index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )
