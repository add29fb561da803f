from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.comments import (
    CommentResponse,
    CreateCommentCommand,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentCommand,
    UpdateCommentUseCase,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/comment", tags=["Comment"])


class CreateCommentRequest(BaseModel):
    """
    Create comment HTTP request payload

    user_id is optional; when present it must be the authenticated user.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, description="Comment content")
    post_id: UUID = Field(..., description="Post being commented on")
    user_id: Optional[UUID] = Field(None, description="Author ID")


class UpdateCommentRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1, description="Comment content")


@router.get("", status_code=status.HTTP_200_OK, response_model=List[CommentResponse])
async def get_comments(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all comments. Public."""
    result = await ListCommentsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{comment_id}", status_code=status.HTTP_200_OK, response_model=CommentResponse)
async def get_comment(comment_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get comment by ID. Public.

    Raises:
        - 404 Not Found: COMMENT_NOT_FOUND
    """
    result = await GetCommentUseCase(uow).execute(comment_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=CommentResponse)
async def create_comment(
    request: CreateCommentRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Comment on a post as the caller.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH (user_id is someone else)
        - 404 Not Found: POST_NOT_FOUND, USER_NOT_FOUND
    """
    command = CreateCommentCommand(
        content=request.content, post_id=request.post_id, user_id=request.user_id
    )

    result = await CreateCommentUseCase(uow).execute(current_user, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{comment_id}", status_code=status.HTTP_200_OK, response_model=CommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentRequest,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update the content of the caller's comment.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: COMMENT_NOT_FOUND
    """
    command = UpdateCommentCommand(content=request.content)

    result = await UpdateCommentUseCase(uow).execute(current_user, comment_id, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{comment_id}", status_code=status.HTTP_200_OK, response_model=CommentResponse)
async def delete_comment(
    comment_id: UUID,
    current_user: str = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete the caller's comment.

    Raises:
        - 401 Unauthorized: missing, invalid or expired token
        - 403 Forbidden: OWNERSHIP_MISMATCH
        - 404 Not Found: COMMENT_NOT_FOUND
    """
    result = await DeleteCommentUseCase(uow).execute(current_user, comment_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
