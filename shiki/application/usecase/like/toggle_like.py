"""Like use cases."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.service import LikeService, VisitorIdentityResolver
from shiki.domain.value import ArticleId


class LikeRequest(BaseModel):
    """Like request.

    ``visitor_hint`` is the client address seen by the API, if any; the
    resolver falls back to its own lookup without it.
    """

    article_id: str  # UUID string
    visitor_hint: str | None = None


class LikeResponse(BaseModel):
    """Like state after the operation."""

    article_id: str
    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for the like button: like, or unlike when already liked."""

    def __init__(
        self, like_service: LikeService, visitor_resolver: VisitorIdentityResolver
    ) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
            visitor_resolver: Visitor identity resolver
        """
        self.like_service = like_service
        self.visitor_resolver = visitor_resolver

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        visitor_id = await self.visitor_resolver.resolve(request.visitor_hint)
        state = await self.like_service.toggle_like(
            ArticleId(UUID(request.article_id)), visitor_id
        )
        return LikeResponse(
            article_id=request.article_id,
            liked=state.liked,
            like_count=state.like_count,
        )


class GetLikeStateUseCase:
    """Use case for rendering the like button."""

    def __init__(
        self, like_service: LikeService, visitor_resolver: VisitorIdentityResolver
    ) -> None:
        self.like_service = like_service
        self.visitor_resolver = visitor_resolver

    async def execute(self, request: LikeRequest) -> LikeResponse:
        """Execute like state lookup.

        Raises:
            NotFoundError: If the article does not exist
        """
        visitor_id = await self.visitor_resolver.resolve(request.visitor_hint)
        state = await self.like_service.get_like_state(
            ArticleId(UUID(request.article_id)), visitor_id
        )
        return LikeResponse(
            article_id=request.article_id,
            liked=state.liked,
            like_count=state.like_count,
        )
