"""Get comment tree use case."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.service import CommentService
from shiki.domain.service.comment_tree import count_nodes
from shiki.domain.value import ArticleId

from .item import CommentNodeResponse


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    article_id: str  # UUID string


class GetCommentTreeResponse(BaseModel):
    """Approved comments of an article as threads."""

    article_id: str
    threads: list[CommentNodeResponse]
    total: int


class GetCommentTreeUseCase:
    """Use case for the comment section of an article."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow."""
        roots = await self.comment_service.get_comment_tree(
            ArticleId(UUID(request.article_id))
        )
        return GetCommentTreeResponse(
            article_id=request.article_id,
            threads=[CommentNodeResponse.from_node(root) for root in roots],
            total=count_nodes(roots),
        )
