"""Domain layer DI providers."""

from dishka import Scope, provide

from shiki.domain.repository import (
    ArticleRepository,
    CategoryRepository,
    CommentRepository,
    LikeRepository,
    MemberRepository,
)
from shiki.domain.service import (
    ArticleService,
    CategoryService,
    CommentService,
    LikeService,
    MemberService,
)
from shiki.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        article_repository: ArticleRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            article_repository=article_repository,
        )

    @provide
    def get_member_service(self, member_repository: MemberRepository) -> MemberService:
        """Provide member domain service."""
        return MemberService(member_repository=member_repository)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)
