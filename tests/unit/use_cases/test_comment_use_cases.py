from uuid import uuid4

import pytest

from src.app.use_cases.comments import (
    CreateCommentCommand,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentCommand,
    UpdateCommentUseCase,
)
from src.domain.entities import Comment, Post, User


@pytest.fixture
def author():
    return User(id=uuid4(), email="author@x.com", password_hash="$2b$04$" + "a" * 53)


@pytest.fixture
def post():
    return Post(id=uuid4(), title="A post", content="Body", user_id=uuid4())


@pytest.fixture
def comment(author, post):
    return Comment(id=uuid4(), content="Nice", user_id=author.id, post_id=post.id)


@pytest.fixture
def lookups(mock_uow, author, post):
    mock_uow.users.get_by_id.side_effect = lambda uid: author if uid == author.id else None
    mock_uow.posts.get_by_id.side_effect = lambda pid: post if pid == post.id else None
    return mock_uow


@pytest.mark.asyncio
async def test_create_comment(lookups, author, post):
    result = await CreateCommentUseCase(lookups).execute(
        str(author.id), CreateCommentCommand(content="Hi", post_id=post.id)
    )

    assert result.is_ok()
    assert result.value.user_id == str(author.id)
    assert result.value.post_id == str(post.id)
    assert result.value.user.email == "author@x.com"
    assert result.value.post.title == "A post"
    lookups.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_comment_on_missing_post(lookups, author):
    result = await CreateCommentUseCase(lookups).execute(
        str(author.id), CreateCommentCommand(content="Hi", post_id=uuid4())
    )

    assert result.error.code == "POST_NOT_FOUND"
    lookups.comments.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_comment_as_someone_else_is_denied(lookups, author, post):
    result = await CreateCommentUseCase(lookups).execute(
        str(uuid4()),
        CreateCommentCommand(content="Hi", post_id=post.id, user_id=author.id),
    )

    assert result.error.code == "OWNERSHIP_MISMATCH"
    lookups.comments.create.assert_not_called()


@pytest.mark.asyncio
async def test_get_comment(lookups, comment):
    lookups.comments.get_by_id.return_value = comment

    result = await GetCommentUseCase(lookups).execute(comment.id)

    assert result.value.content == "Nice"
    assert result.value.user.email == "author@x.com"


@pytest.mark.asyncio
async def test_get_comment_not_found(mock_uow):
    result = await GetCommentUseCase(mock_uow).execute(uuid4())

    assert result.error.code == "COMMENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_comments(lookups, comment):
    lookups.comments.list_all.return_value = [comment]

    result = await ListCommentsUseCase(lookups).execute()

    assert [c.id for c in result.value] == [str(comment.id)]


@pytest.mark.asyncio
async def test_update_own_comment(lookups, author, comment):
    lookups.comments.get_by_id.return_value = comment

    result = await UpdateCommentUseCase(lookups).execute(
        str(author.id), comment.id, UpdateCommentCommand(content="Edited")
    )

    assert result.value.content == "Edited"
    lookups.comments.update.assert_called_once_with(comment)
    lookups.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_foreign_comment_is_denied(lookups, comment):
    lookups.comments.get_by_id.return_value = comment

    result = await UpdateCommentUseCase(lookups).execute(
        str(uuid4()), comment.id, UpdateCommentCommand(content="Edited")
    )

    assert result.error.code == "OWNERSHIP_MISMATCH"
    assert comment.content == "Nice"
    lookups.comments.update.assert_not_called()


@pytest.mark.asyncio
async def test_delete_own_comment(lookups, author, comment):
    lookups.comments.get_by_id.return_value = comment

    result = await DeleteCommentUseCase(lookups).execute(str(author.id), comment.id)

    assert result.value.id == str(comment.id)
    lookups.comments.delete.assert_called_once_with(comment)
    lookups.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_foreign_comment_is_denied(lookups, comment):
    lookups.comments.get_by_id.return_value = comment

    result = await DeleteCommentUseCase(lookups).execute(str(uuid4()), comment.id)

    assert result.error.code == "OWNERSHIP_MISMATCH"
    lookups.comments.delete.assert_not_called()
    lookups.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_comment(mock_uow):
    result = await DeleteCommentUseCase(mock_uow).execute(str(uuid4()), uuid4())

    assert result.error.code == "COMMENT_NOT_FOUND"
