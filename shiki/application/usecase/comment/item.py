"""Comment representations shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from shiki.domain.model import Comment
from shiki.domain.service import CommentNode
from shiki.domain.value import CommentStatus


class CommentItem(BaseModel):
    """Comment as shown to readers (email is never included)."""

    comment_id: str
    article_id: str
    parent_id: str | None
    author_name: str
    content: str
    status: CommentStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author_name,
            content=comment.content,
            status=comment.status,
            created_at=comment.created_at,
        )


class CommentNodeResponse(CommentItem):
    """Comment with its replies, recursively."""

    replies: list["CommentNodeResponse"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain thread node, replies included."""
        return cls(
            **CommentItem.from_domain(node.comment).model_dump(),
            replies=[cls.from_node(reply) for reply in node.replies],
        )
