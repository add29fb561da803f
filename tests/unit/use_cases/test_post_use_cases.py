from uuid import uuid4

import pytest

from src.app.use_cases.posts import (
    CreatePostCommand,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostCommand,
    UpdatePostUseCase,
)
from src.domain.entities import Comment, Post, User


@pytest.fixture
def owner():
    return User(id=uuid4(), email="owner@x.com", password_hash="$2b$04$" + "a" * 53)


@pytest.fixture
def post(owner):
    return Post(id=uuid4(), title="Title", content="Body", user_id=owner.id)


@pytest.mark.asyncio
async def test_create_post_defaults_owner_to_caller(mock_uow, owner):
    mock_uow.users.get_by_id.return_value = owner

    result = await CreatePostUseCase(mock_uow).execute(
        str(owner.id), CreatePostCommand(title="Hello", content="World")
    )

    assert result.is_ok()
    assert result.value.user_id == str(owner.id)
    assert result.value.title == "Hello"
    mock_uow.posts.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_post_for_someone_else_is_denied(mock_uow, owner):
    result = await CreatePostUseCase(mock_uow).execute(
        str(uuid4()), CreatePostCommand(title="Hello", content="World", user_id=owner.id)
    )

    assert result.is_err()
    assert result.error.code == "OWNERSHIP_MISMATCH"
    mock_uow.posts.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_post_after_account_deleted(mock_uow):
    """Token outlives the account; the write is refused"""
    result = await CreatePostUseCase(mock_uow).execute(
        str(uuid4()), CreatePostCommand(title="Hello", content="World")
    )

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.posts.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_post_with_comments(mock_uow, post, owner):
    comment = Comment(id=uuid4(), content="First", user_id=owner.id, post_id=post.id)
    mock_uow.posts.get_by_id.return_value = post
    mock_uow.comments.list_by_post_id.return_value = [comment]

    result = await GetPostUseCase(mock_uow).execute(post.id)

    assert result.is_ok()
    assert result.value.id == str(post.id)
    assert [c.content for c in result.value.comments] == ["First"]


@pytest.mark.asyncio
async def test_get_post_not_found(mock_uow):
    result = await GetPostUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_posts(mock_uow, post):
    mock_uow.posts.list_all.return_value = [post]

    result = await ListPostsUseCase(mock_uow).execute()

    assert [p.id for p in result.value] == [str(post.id)]


@pytest.mark.asyncio
async def test_update_own_post(mock_uow, post, owner):
    mock_uow.posts.get_by_id.return_value = post

    result = await UpdatePostUseCase(mock_uow).execute(
        str(owner.id), post.id, UpdatePostCommand(title="New", content="Text")
    )

    assert result.is_ok()
    assert result.value.title == "New"
    assert result.value.content == "Text"
    mock_uow.posts.update.assert_called_once_with(post)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_foreign_post_is_denied(mock_uow, post):
    mock_uow.posts.get_by_id.return_value = post

    result = await UpdatePostUseCase(mock_uow).execute(
        str(uuid4()), post.id, UpdatePostCommand(title="New", content="Text")
    )

    assert result.error.code == "OWNERSHIP_MISMATCH"
    assert post.title == "Title"
    mock_uow.posts.update.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_missing_post(mock_uow):
    result = await UpdatePostUseCase(mock_uow).execute(
        str(uuid4()), uuid4(), UpdatePostCommand(title="New", content="Text")
    )

    assert result.error.code == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_own_post_removes_comments(mock_uow, post, owner):
    comments = [
        Comment(id=uuid4(), content="c1", user_id=uuid4(), post_id=post.id),
        Comment(id=uuid4(), content="c2", user_id=owner.id, post_id=post.id),
    ]
    mock_uow.posts.get_by_id.return_value = post
    mock_uow.comments.list_by_post_id.return_value = comments

    result = await DeletePostUseCase(mock_uow).execute(str(owner.id), post.id)

    assert result.is_ok()
    assert len(result.value.comments) == 2
    assert mock_uow.comments.delete.call_count == 2
    mock_uow.posts.delete.assert_called_once_with(post)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_foreign_post_is_denied(mock_uow, post):
    mock_uow.posts.get_by_id.return_value = post

    result = await DeletePostUseCase(mock_uow).execute(str(uuid4()), post.id)

    assert result.error.code == "OWNERSHIP_MISMATCH"
    mock_uow.posts.delete.assert_not_called()
    mock_uow.comments.delete.assert_not_called()
