"""Comment use cases."""

from .get_comment_tree import (
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .item import CommentItem, CommentNodeResponse
from .moderate_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListPendingCommentsRequest,
    ListPendingCommentsResponse,
    ListPendingCommentsUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
)

__all__ = [
    "CommentItem",
    "CommentNodeResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ListPendingCommentsRequest",
    "ListPendingCommentsResponse",
    "ListPendingCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
]
