"""Article use cases."""

from .admin_overview import AdminOverviewResponse, AdminOverviewUseCase, DashboardStats
from .create_article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
)
from .delete_article import DeleteArticleRequest, DeleteArticleUseCase
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .item import ArticleDetail, ArticleItem
from .list_articles import (
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .set_article_status import (
    SetArticleStatusRequest,
    SetArticleStatusResponse,
    SetArticleStatusUseCase,
)

__all__ = [
    "AdminOverviewResponse",
    "AdminOverviewUseCase",
    "ArticleDetail",
    "ArticleItem",
    "CreateArticleRequest",
    "CreateArticleResponse",
    "CreateArticleUseCase",
    "DashboardStats",
    "DeleteArticleRequest",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "SetArticleStatusRequest",
    "SetArticleStatusResponse",
    "SetArticleStatusUseCase",
]
