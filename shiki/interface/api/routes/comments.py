"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from shiki.application.usecase.comment import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

router = APIRouter(prefix="/articles", tags=["comments"], route_class=DishkaRoute)


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment.

    Blank fields are reported by the use case with the field name, so they
    are not constrained here.
    """

    author_name: str = ""
    email: str = ""
    content: str = ""
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/{article_id}/comments", response_model=GetCommentTreeResponse)
async def get_comments(
    article_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """Get the approved comments of an article as threads.

    Args:
        article_id: Article UUID
        get_comment_tree_use_case: Comment tree use case from DI

    Returns:
        Threads, newest first, with nested replies
    """
    return await get_comment_tree_use_case.execute(
        GetCommentTreeRequest(article_id=article_id)
    )


@router.post(
    "/{article_id}/comments",
    response_model=SubmitCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_comment(
    article_id: str,
    request: SubmitCommentAPIRequest,
    submit_comment_use_case: FromDishka[SubmitCommentUseCase],
) -> SubmitCommentResponse:
    """Submit a comment or reply for moderation.

    Args:
        article_id: Article UUID
        request: Comment data
        submit_comment_use_case: Submit comment use case from DI

    Returns:
        The pending comment
    """
    use_case_request = SubmitCommentRequest(
        article_id=article_id,
        parent_id=request.parent_id,
        author_name=request.author_name,
        email=request.email,
        content=request.content,
    )
    return await submit_comment_use_case.execute(use_case_request)
