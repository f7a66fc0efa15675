"""Moderate comment use cases (admin)."""

from uuid import UUID

from pydantic import BaseModel, Field

from shiki.domain.service import CommentService
from shiki.domain.value import CommentId, CommentStatus

from .item import CommentItem


class ModerateCommentRequest(BaseModel):
    """Approve or reject a comment."""

    comment_id: str  # UUID string
    status: CommentStatus


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment: CommentItem


class ModerateCommentUseCase:
    """Use case for approving or rejecting a comment.

    Repeating a decision is accepted and changes nothing.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderation.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.set_status(
            CommentId(UUID(request.comment_id)), request.status
        )
        return ModerateCommentResponse(comment=CommentItem.from_domain(comment))


class ListPendingCommentsRequest(BaseModel):
    """Moderation queue request."""

    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListPendingCommentsResponse(BaseModel):
    """Pending comments, oldest first."""

    comments: list[CommentItem]


class ListPendingCommentsUseCase:
    """Use case for the moderation queue."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: ListPendingCommentsRequest
    ) -> ListPendingCommentsResponse:
        """Execute moderation queue listing."""
        comments = await self.comment_service.list_by_status(
            CommentStatus.PENDING, limit=request.limit, offset=request.offset
        )
        return ListPendingCommentsResponse(
            comments=[CommentItem.from_domain(c) for c in comments]
        )


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the comment does not exist
        """
        await self.comment_service.delete_comment(CommentId(UUID(request.comment_id)))
