"""Comment domain service."""

from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from shiki.domain.error import NotFoundError, ValidationError
from shiki.domain.model.comment import Comment
from shiki.domain.model.common import utc_now
from shiki.domain.repository import CommentRepository
from shiki.domain.value import ArticleId, CommentId, CommentStatus

from .base import Service
from .comment_tree import CommentNode, build_comment_tree, count_nodes


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    def validate_submission(self, author_name: str, email: str, content: str) -> None:
        """Check the reader-supplied fields of a submission.

        Raises:
            ValidationError: On the first blank field
        """
        for field, value in (
            ("author_name", author_name),
            ("email", email),
            ("content", content),
        ):
            if not value or not value.strip():
                logfire.info("Comment rejected: blank field", field=field)
                raise ValidationError(field, f"{field} is required")

    async def submit_comment(
        self,
        article_id: ArticleId | None,
        author_name: str,
        email: str,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Submit a reader comment or reply.

        Every submission is stored as pending; it only becomes visible after a
        moderator approves it.

        Args:
            article_id: Article being commented on
            author_name: Display name
            email: Author email (never shown)
            content: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created pending comment

        Raises:
            ValidationError: If a required field is blank, or the parent
                belongs to another article
            StoreError: If the comment could not be stored
        """
        with logfire.span(
            "comment_service.submit_comment",
            article_id=str(article_id) if article_id else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if article_id is None:
                raise ValidationError("article_id", "Article is required")
            self.validate_submission(author_name, email, content)

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                # A missing parent is tolerated; the reply shows as a root.
                if parent is not None and parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise ValidationError(
                        "parent_id", "Parent comment does not belong to this article"
                    )

            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    article_id=article_id,
                    parent_id=parent_id,
                    author_name=author_name.strip(),
                    email=email.strip(),
                    content=content.strip(),
                    status=CommentStatus.PENDING,
                    created_at=utc_now(),
                )
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = str(error["loc"][0]) if error["loc"] else "comment"
                raise ValidationError(field, error["msg"]) from e
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment submitted for moderation",
                comment_id=str(saved.id),
                article_id=str(article_id),
            )
            return saved

    async def get_comment_tree(self, article_id: ArticleId) -> list[CommentNode]:
        """Approved comments of an article, threaded.

        Roots are newest first, as are replies within a thread.
        """
        with logfire.span(
            "comment_service.get_comment_tree", article_id=str(article_id)
        ):
            comments = await self.comment_repository.find_by_article(
                article_id, status=CommentStatus.APPROVED
            )
            roots = build_comment_tree(comments)
            logfire.info(
                "Comment tree built",
                article_id=str(article_id),
                comments=count_nodes(roots),
                threads=len(roots),
            )
            return roots

    async def set_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Moderate a comment.

        Setting the status a comment already has is a no-op.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.set_status",
            comment_id=str(comment_id),
            status=status.value,
        ):
            current = await self.comment_repository.find_by_id(comment_id)
            if current is None:
                raise NotFoundError("Comment", str(comment_id))
            if current.status == status:
                logfire.info("Comment status unchanged", comment_id=str(comment_id))
                return current

            updated = await self.comment_repository.update_status(comment_id, status)
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                previous=current.status.value,
                status=status.value,
            )
            return updated

    async def list_by_status(
        self, status: CommentStatus, limit: int = 50, offset: int = 0
    ) -> list[Comment]:
        """Comments across all articles in one status, oldest first."""
        return await self.comment_repository.find_by_status(status, limit, offset)

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Replies to it are kept and show up as roots.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment_id)
        ):
            if not await self.comment_repository.delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))
