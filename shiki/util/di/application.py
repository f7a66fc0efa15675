"""Application layer DI providers."""

from dishka import Scope, provide

from shiki.application.usecase.article import (
    AdminOverviewUseCase,
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    SetArticleStatusUseCase,
)
from shiki.application.usecase.category import ListCategoriesUseCase
from shiki.application.usecase.comment import (
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    ListPendingCommentsUseCase,
    ModerateCommentUseCase,
    SubmitCommentUseCase,
)
from shiki.application.usecase.home import GetHomeOverviewUseCase
from shiki.application.usecase.like import GetLikeStateUseCase, ToggleLikeUseCase
from shiki.application.usecase.member import GetMemberUseCase, ListMembersUseCase
from shiki.config import ListingSettings
from shiki.domain.service import (
    ArticleService,
    CategoryService,
    CommentService,
    LikeService,
    MemberService,
    VisitorIdentityResolver,
)
from shiki.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Article use cases
    @provide
    def get_list_articles_use_case(
        self, article_service: ArticleService, listing_settings: ListingSettings
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_service=article_service, listing_settings=listing_settings
        )

    @provide
    def get_article_use_case(self, article_service: ArticleService) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide
    def get_create_article_use_case(
        self, article_service: ArticleService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(article_service=article_service)

    @provide
    def get_set_article_status_use_case(
        self, article_service: ArticleService
    ) -> SetArticleStatusUseCase:
        """Provide set article status use case."""
        return SetArticleStatusUseCase(article_service=article_service)

    @provide
    def get_delete_article_use_case(
        self, article_service: ArticleService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(article_service=article_service)

    @provide
    def get_admin_overview_use_case(
        self, article_service: ArticleService
    ) -> AdminOverviewUseCase:
        """Provide admin overview use case."""
        return AdminOverviewUseCase(article_service=article_service)

    # Comment use cases
    @provide
    def get_submit_comment_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service, article_service=article_service
        )

    @provide
    def get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(comment_service=comment_service)

    @provide
    def get_moderate_comment_use_case(
        self, comment_service: CommentService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_pending_comments_use_case(
        self, comment_service: CommentService
    ) -> ListPendingCommentsUseCase:
        """Provide moderation queue use case."""
        return ListPendingCommentsUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_toggle_like_use_case(
        self, like_service: LikeService, visitor_resolver: VisitorIdentityResolver
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            like_service=like_service, visitor_resolver=visitor_resolver
        )

    @provide
    def get_like_state_use_case(
        self, like_service: LikeService, visitor_resolver: VisitorIdentityResolver
    ) -> GetLikeStateUseCase:
        """Provide like state use case."""
        return GetLikeStateUseCase(
            like_service=like_service, visitor_resolver=visitor_resolver
        )

    # Member, category and home use cases
    @provide
    def get_list_members_use_case(
        self, member_service: MemberService
    ) -> ListMembersUseCase:
        """Provide list members use case."""
        return ListMembersUseCase(member_service=member_service)

    @provide
    def get_member_use_case(self, member_service: MemberService) -> GetMemberUseCase:
        """Provide get member use case."""
        return GetMemberUseCase(member_service=member_service)

    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_home_overview_use_case(
        self,
        article_service: ArticleService,
        member_service: MemberService,
        listing_settings: ListingSettings,
    ) -> GetHomeOverviewUseCase:
        """Provide home overview use case."""
        return GetHomeOverviewUseCase(
            article_service=article_service,
            member_service=member_service,
            listing_settings=listing_settings,
        )
