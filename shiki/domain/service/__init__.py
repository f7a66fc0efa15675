"""Domain services."""

from .article_query import (
    ArticlePage,
    interpret_article_result,
    page_window,
    plan_article_query,
)
from .article_service import ArticleService
from .base import Service
from .category_service import CategoryService
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .like_service import LikeService, LikeState
from .member_service import MemberService
from .visitor_identity import VisitorIdentityResolver

__all__ = [
    "ArticlePage",
    "ArticleService",
    "CategoryService",
    "CommentNode",
    "CommentService",
    "LikeService",
    "LikeState",
    "MemberService",
    "Service",
    "VisitorIdentityResolver",
    "build_comment_tree",
    "interpret_article_result",
    "page_window",
    "plan_article_query",
]
