"""Comment section state for an article page."""

from typing import Optional

import logfire
from pydantic import BaseModel

from shiki.domain.error import StoreError, ValidationError
from shiki.domain.model import Comment
from shiki.domain.service import CommentNode, CommentService
from shiki.domain.value import ArticleId, CommentId
from shiki.util.sequence import RequestSequence

LOAD_FAILED_NOTICE = "Comments could not be loaded. Please try again."
SUBMIT_FAILED_NOTICE = "Your comment could not be sent. Please try again."


class SubmissionResult(BaseModel):
    """Outcome of a comment submission, for the form to render."""

    accepted: bool
    comment: Optional[Comment] = None
    field: Optional[str] = None
    message: Optional[str] = None


class CommentThreadController:
    """Threads of approved comments plus the submission form outcome.

    The thread list is replaced as a whole on each successful load and kept
    as is when a load fails.
    """

    def __init__(
        self,
        article_id: ArticleId,
        comment_service: CommentService,
    ) -> None:
        self.article_id = article_id
        self.comment_service = comment_service
        self.sequence = RequestSequence()

        self.threads: list[CommentNode] = []
        self.reply_to: Optional[CommentId] = None
        self.notice: Optional[str] = None

    async def load(self) -> bool:
        """Fetch and thread the approved comments."""
        token = self.sequence.issue()
        try:
            threads = await self.comment_service.get_comment_tree(self.article_id)
        except StoreError as e:
            if self.sequence.is_current(token):
                logfire.warn("Comment load failed", error=str(e))
                self.notice = LOAD_FAILED_NOTICE
            return False

        if not self.sequence.is_current(token):
            return False
        self.threads = threads
        self.notice = None
        return True

    def start_reply(self, parent_id: Optional[CommentId]) -> None:
        """Point the form at a comment to reply to (None for top level)."""
        self.reply_to = parent_id

    async def submit(
        self, author_name: str, email: str, content: str
    ) -> SubmissionResult:
        """Submit the form.

        The new comment awaits moderation, so the thread list is unchanged.
        """
        try:
            comment = await self.comment_service.submit_comment(
                article_id=self.article_id,
                author_name=author_name,
                email=email,
                content=content,
                parent_id=self.reply_to,
            )
        except ValidationError as e:
            return SubmissionResult(accepted=False, field=e.field, message=e.message)
        except StoreError as e:
            logfire.warn("Comment submission failed", error=str(e))
            self.notice = SUBMIT_FAILED_NOTICE
            return SubmissionResult(accepted=False, message=SUBMIT_FAILED_NOTICE)

        self.reply_to = None
        return SubmissionResult(accepted=True, comment=comment)

    def dismiss_notice(self) -> None:
        self.notice = None
