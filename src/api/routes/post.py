from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostDetailResponse,
    PostResponse,
    UpdatePostCommand,
    UpdatePostUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/post", tags=["Post"])


class CreatePostRequest(BaseModel):
    """
    Create post HTTP request payload

    user_id is optional; when present it must be the authenticated user.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=70, description="Post title (max 70 chars)")
    content: str = Field(..., min_length=1, description="Post content")
    user_id: Optional[UUID] = Field(None, description="Author ID")


class UpdatePostRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=70, description="Post title (max 70 chars)")
    content: str = Field(..., min_length=1, description="Post content")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PostResponse])
async def get_posts(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all posts. Public."""
    result = await ListPostsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostDetailResponse)
async def get_post(post_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get post by ID, with its comments. Public.

    Raises:
        - 404 Not Found: POST_NOT_FOUND
    """
    result = await GetPostUseCase(uow).execute(post_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=PostResponse)
async def create_post(
    request: CreatePostRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a post owned by the caller.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH (user_id is someone else)
        - 404 Not Found: USER_NOT_FOUND (account deleted after login)
    """
    command = CreatePostCommand(
        title=request.title, content=request.content, user_id=request.user_id
    )

    result = await CreatePostUseCase(uow).execute(current_user, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostDetailResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update title and content of the caller's post.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: POST_NOT_FOUND
    """
    command = UpdatePostCommand(title=request.title, content=request.content)

    result = await UpdatePostUseCase(uow).execute(current_user, post_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{post_id}", status_code=status.HTTP_200_OK, response_model=PostDetailResponse)
async def delete_post(
    post_id: UUID,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete the caller's post and its comments.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: POST_NOT_FOUND
    """
    result = await DeletePostUseCase(uow).execute(current_user, post_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
