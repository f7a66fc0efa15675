"""Submit comment use case."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.error import ValidationError
from shiki.domain.service import ArticleService, CommentService
from shiki.domain.value import ArticleId, CommentId

from .item import CommentItem


class SubmitCommentRequest(BaseModel):
    """Submit comment request.

    Blank fields are accepted here and rejected by the comment service, so
    the reader gets a field-level message instead of a schema error.
    """

    article_id: str  # UUID string
    parent_id: str | None = None  # Parent comment ID for replies
    author_name: str = ""
    email: str = ""
    content: str = ""


class SubmitCommentResponse(BaseModel):
    """Submit comment response."""

    comment: CommentItem
    awaiting_moderation: bool = True


class SubmitCommentUseCase:
    """Use case for a reader submitting a comment or a reply."""

    def __init__(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> None:
        """Initialize submit comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
        """
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Raises:
            ValidationError: If a required field is blank or an id is malformed
            NotFoundError: If the article does not exist or is not published
            StoreError: If the comment could not be stored
        """
        article_id = _parse_id(request.article_id, "article_id")
        parent_id = (
            CommentId(_parse_id(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )

        # Field checks run before any store call
        self.comment_service.validate_submission(
            request.author_name, request.email, request.content
        )
        await self.article_service.get_published_article(ArticleId(article_id))

        comment = await self.comment_service.submit_comment(
            article_id=ArticleId(article_id),
            author_name=request.author_name,
            email=request.email,
            content=request.content,
            parent_id=parent_id,
        )
        return SubmitCommentResponse(comment=CommentItem.from_domain(comment))


def _parse_id(value: str, field: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(field, "Invalid identifier") from e
