from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Comment
from .dtos import CommentResponse


async def load_comment_response(uow: UnitOfWork, comment: Comment) -> CommentResponse:
    """Attach the author's email and the post's title to a comment"""
    user = await uow.users.get_by_id(comment.user_id)
    post = await uow.posts.get_by_id(comment.post_id)
    return CommentResponse.build(comment, user, post)
