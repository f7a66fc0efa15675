"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from shiki.application.usecase.like import (
    GetLikeStateUseCase,
    LikeRequest,
    LikeResponse,
    ToggleLikeUseCase,
)
from shiki.config import VisitorSettings

router = APIRouter(prefix="/articles", tags=["likes"], route_class=DishkaRoute)


def client_address(request: Request, trust_forwarded_for: bool) -> str | None:
    """Best guess at the visitor's address for this request.

    Behind a proxy the first ``X-Forwarded-For`` entry is the client.
    """
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client is not None:
        return request.client.host
    return None


@router.get("/{article_id}/like", response_model=LikeResponse)
async def get_like_state(
    article_id: str,
    request: Request,
    get_like_state_use_case: FromDishka[GetLikeStateUseCase],
    visitor_settings: FromDishka[VisitorSettings],
) -> LikeResponse:
    """Whether the current visitor liked the article, and its like count.

    Args:
        article_id: Article UUID
        request: Incoming request, for the client address
        get_like_state_use_case: Like state use case from DI
        visitor_settings: Visitor settings from DI

    Returns:
        Like state
    """
    hint = client_address(request, visitor_settings.trust_forwarded_for)
    return await get_like_state_use_case.execute(
        LikeRequest(article_id=article_id, visitor_hint=hint)
    )


@router.post("/{article_id}/like", response_model=LikeResponse)
async def toggle_like(
    article_id: str,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    visitor_settings: FromDishka[VisitorSettings],
) -> LikeResponse:
    """Like the article, or unlike it when the visitor already has.

    Args:
        article_id: Article UUID
        request: Incoming request, for the client address
        toggle_like_use_case: Toggle like use case from DI
        visitor_settings: Visitor settings from DI

    Returns:
        Like state after the toggle
    """
    hint = client_address(request, visitor_settings.trust_forwarded_for)
    return await toggle_like_use_case.execute(
        LikeRequest(article_id=article_id, visitor_hint=hint)
    )
