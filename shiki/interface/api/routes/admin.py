"""Admin routes: article management and comment moderation."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from shiki.application.usecase.article import (
    AdminOverviewResponse,
    AdminOverviewUseCase,
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    SetArticleStatusRequest,
    SetArticleStatusResponse,
    SetArticleStatusUseCase,
)
from shiki.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListPendingCommentsRequest,
    ListPendingCommentsResponse,
    ListPendingCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from shiki.domain.value import ArticleStatus, CommentStatus

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class SetArticleStatusAPIRequest(BaseModel):
    """API request for changing an article's status.

    Omit ``status`` to toggle between draft and published.
    """

    status: ArticleStatus | None = None


class ModerateCommentAPIRequest(BaseModel):
    """API request for moderating a comment."""

    status: CommentStatus


@router.get("/overview", response_model=AdminOverviewResponse)
async def get_overview(
    admin_overview_use_case: FromDishka[AdminOverviewUseCase],
) -> AdminOverviewResponse:
    """Dashboard statistics and every article, drafts included."""
    return await admin_overview_use_case.execute()


@router.post(
    "/articles",
    response_model=CreateArticleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    request: CreateArticleRequest,
    create_article_use_case: FromDishka[CreateArticleUseCase],
) -> CreateArticleResponse:
    """Create an article, as a draft unless a status is given.

    Args:
        request: Article data
        create_article_use_case: Create article use case from DI

    Returns:
        Created article
    """
    return await create_article_use_case.execute(request)


@router.patch("/articles/{article_id}/status", response_model=SetArticleStatusResponse)
async def set_article_status(
    article_id: str,
    request: SetArticleStatusAPIRequest,
    set_article_status_use_case: FromDishka[SetArticleStatusUseCase],
) -> SetArticleStatusResponse:
    """Publish, unpublish or toggle an article.

    Args:
        article_id: Article UUID
        request: Target status, or none to toggle
        set_article_status_use_case: Set status use case from DI

    Returns:
        Updated article
    """
    return await set_article_status_use_case.execute(
        SetArticleStatusRequest(article_id=article_id, status=request.status)
    )


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
) -> None:
    """Delete an article."""
    await delete_article_use_case.execute(DeleteArticleRequest(article_id=article_id))
    logfire.info("Article deleted via admin", article_id=article_id)


@router.get("/comments/pending", response_model=ListPendingCommentsResponse)
async def list_pending_comments(
    list_pending_comments_use_case: FromDishka[ListPendingCommentsUseCase],
    limit: int = 50,
    offset: int = 0,
) -> ListPendingCommentsResponse:
    """Moderation queue, oldest first."""
    return await list_pending_comments_use_case.execute(
        ListPendingCommentsRequest(limit=limit, offset=offset)
    )


@router.patch("/comments/{comment_id}", response_model=ModerateCommentResponse)
async def moderate_comment(
    comment_id: str,
    request: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
) -> ModerateCommentResponse:
    """Approve or reject a comment.

    Args:
        comment_id: Comment UUID
        request: New status
        moderate_comment_use_case: Moderate comment use case from DI

    Returns:
        Updated comment
    """
    return await moderate_comment_use_case.execute(
        ModerateCommentRequest(comment_id=comment_id, status=request.status)
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete a comment. Its replies become top-level threads."""
    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
